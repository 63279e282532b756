"""Fixed reference data loaded at deployment."""

from datetime import date

from app.models.politics import Politician
from app.models.reference import Office, Region

# States and the FCT, with their geopolitical zone
REGIONS = [
    Region("AB", "Abia", "South East"),
    Region("AD", "Adamawa", "North East"),
    Region("AK", "Akwa Ibom", "South South"),
    Region("AN", "Anambra", "South East"),
    Region("BA", "Bauchi", "North East"),
    Region("BY", "Bayelsa", "South South"),
    Region("BE", "Benue", "North Central"),
    Region("BO", "Borno", "North East"),
    Region("CR", "Cross River", "South South"),
    Region("DE", "Delta", "South South"),
    Region("EB", "Ebonyi", "South East"),
    Region("ED", "Edo", "South South"),
    Region("EK", "Ekiti", "South West"),
    Region("EN", "Enugu", "South East"),
    Region("FC", "FCT Abuja", "North Central"),
    Region("GO", "Gombe", "North East"),
    Region("IM", "Imo", "South East"),
    Region("JI", "Jigawa", "North West"),
    Region("KD", "Kaduna", "North West"),
    Region("KN", "Kano", "North West"),
    Region("KT", "Katsina", "North West"),
    Region("KE", "Kebbi", "North West"),
    Region("KO", "Kogi", "North Central"),
    Region("KW", "Kwara", "North Central"),
    Region("LA", "Lagos", "South West"),
    Region("NA", "Nasarawa", "North Central"),
    Region("NI", "Niger", "North Central"),
    Region("OG", "Ogun", "South West"),
    Region("ON", "Ondo", "South West"),
    Region("OS", "Osun", "South West"),
    Region("OY", "Oyo", "South West"),
    Region("PL", "Plateau", "North Central"),
    Region("RI", "Rivers", "South South"),
    Region("SO", "Sokoto", "North West"),
    Region("TA", "Taraba", "North East"),
    Region("YO", "Yobe", "North East"),
    Region("ZA", "Zamfara", "North West"),
]

OFFICES = [
    Office("President of Nigeria", "PRESIDENT", "Federal", "Head of State and Government"),
    Office("Vice President of Nigeria", "VICE_PRESIDENT", "Federal", "Deputy Head of State"),
    Office("Governor", "GOVERNOR", "State", "State Chief Executive"),
    Office("Deputy Governor", "DEPUTY_GOVERNOR", "State", "Deputy State Chief Executive"),
    Office("Senator", "SENATOR", "Federal", "Member of the Senate"),
    Office("House of Representatives Member", "HOUSE_OF_REPS", "Federal", "Member of the House of Representatives"),
    Office("State House of Assembly Member", "STATE_ASSEMBLY", "State", "State Legislator"),
    Office("Minister", "MINISTER", "Federal", "Federal Cabinet Member"),
    Office("Local Government Chairman", "LG_CHAIRMAN", "Local", "LGA Chief Executive"),
]

# Start of the current administration
INAUGURATION_DATE = date(2023, 5, 29)


def _governor(first, last, party, state, score, bio, middle=None):
    return Politician(first, last, party, state, "GOVERNOR", bio, middle_name=middle, performance_score=score)


def _senator(first, last, party, state, score, bio, middle=None):
    return Politician(first, last, party, state, "SENATOR", bio, middle_name=middle, performance_score=score)


def _rep(first, last, party, state, score, bio):
    return Politician(first, last, party, state, "HOUSE_OF_REPS", bio, performance_score=score)


POLITICIANS = [
    # Federal executive
    Politician(
        "Bola",
        "Tinubu",
        "APC",
        "Lagos",
        "PRESIDENT",
        "President of the Federal Republic of Nigeria. Former Governor of Lagos State (1999-2007).",
        middle_name="Ahmed",
        date_of_birth=date(1952, 3, 29),
        performance_score=65.5,
    ),
    Politician(
        "Kashim",
        "Shettima",
        "APC",
        "Borno",
        "VICE_PRESIDENT",
        "Vice President of the Federal Republic of Nigeria. Former Governor of Borno State (2011-2019).",
        date_of_birth=date(1966, 9, 2),
        performance_score=62.0,
    ),
    # Governors
    _governor("Alex", "Otti", "LP", "Abia", 72.5, "Governor of Abia State. Former GMD of Diamond Bank."),
    _governor("Ahmadu", "Fintiri", "PDP", "Adamawa", 58.0, "Governor of Adamawa State.", "Umaru"),
    _governor("Umo", "Eno", "PDP", "Akwa Ibom", 55.0, "Governor of Akwa Ibom State.", "Bassey"),
    _governor("Charles", "Soludo", "APGA", "Anambra", 70.0, "Governor of Anambra State. Former CBN Governor."),
    _governor("Bala", "Mohammed", "PDP", "Bauchi", 60.0, "Governor of Bauchi State. Former FCT Minister."),
    _governor("Douye", "Diri", "PDP", "Bayelsa", 56.0, "Governor of Bayelsa State."),
    _governor("Hyacinth", "Alia", "APC", "Benue", 52.0, "Governor of Benue State."),
    _governor("Babagana", "Zulum", "APC", "Borno", 78.0, "Governor of Borno State. Serving his second term."),
    _governor("Bassey", "Otu", "APC", "Cross River", 54.0, "Governor of Cross River State."),
    _governor("Sheriff", "Oborevwori", "PDP", "Delta", 58.0, "Governor of Delta State."),
    _governor("Francis", "Nwifuru", "APC", "Ebonyi", 50.0, "Governor of Ebonyi State."),
    _governor("Monday", "Okpebholo", "APC", "Edo", 48.0, "Governor of Edo State. Elected in 2024."),
    _governor("Biodun", "Oyebanji", "APC", "Ekiti", 64.0, "Governor of Ekiti State.", "Abayomi"),
    _governor("Peter", "Mbah", "PDP", "Enugu", 68.0, "Governor of Enugu State.", "Ndubuisi"),
    _governor("Inuwa", "Yahaya", "APC", "Gombe", 62.0, "Governor of Gombe State."),
    _governor("Hope", "Uzodinma", "APC", "Imo", 55.0, "Governor of Imo State."),
    _governor("Umar", "Namadi", "APC", "Jigawa", 56.0, "Governor of Jigawa State."),
    _governor("Uba", "Sani", "APC", "Kaduna", 58.0, "Governor of Kaduna State."),
    _governor("Abba", "Yusuf", "NNPP", "Kano", 66.0, "Governor of Kano State.", "Kabir"),
    _governor("Dikko", "Radda", "APC", "Katsina", 54.0, "Governor of Katsina State.", "Umaru"),
    _governor("Nasir", "Idris", "APC", "Kebbi", 52.0, "Governor of Kebbi State."),
    _governor("Ahmed", "Ododo", "APC", "Kogi", 50.0, "Governor of Kogi State.", "Usman"),
    _governor("AbdulRahman", "AbdulRazaq", "APC", "Kwara", 62.0, "Governor of Kwara State."),
    _governor("Babajide", "Sanwo-Olu", "APC", "Lagos", 70.0, "Governor of Lagos State.", "Olusola"),
    _governor("Abdullahi", "Sule", "APC", "Nasarawa", 60.0, "Governor of Nasarawa State."),
    _governor("Mohammed", "Bago", "APC", "Niger", 54.0, "Governor of Niger State.", "Umaru"),
    _governor("Dapo", "Abiodun", "APC", "Ogun", 64.0, "Governor of Ogun State."),
    _governor("Lucky", "Aiyedatiwa", "APC", "Ondo", 52.0, "Governor of Ondo State."),
    _governor("Ademola", "Adeleke", "PDP", "Osun", 58.0, "Governor of Osun State.", "Jackson Nurudeen"),
    _governor("Seyi", "Makinde", "PDP", "Oyo", 72.0, "Governor of Oyo State. Engineer and businessman."),
    _governor("Caleb", "Mutfwang", "PDP", "Plateau", 56.0, "Governor of Plateau State."),
    _governor("Siminalayi", "Fubara", "PDP", "Rivers", 60.0, "Governor of Rivers State."),
    _governor("Ahmad", "Aliyu", "APC", "Sokoto", 54.0, "Governor of Sokoto State."),
    _governor("Agbu", "Kefas", "PDP", "Taraba", 52.0, "Governor of Taraba State."),
    _governor("Mai", "Buni", "APC", "Yobe", 58.0, "Governor of Yobe State.", "Mala"),
    _governor("Dauda", "Lawal", "PDP", "Zamfara", 54.0, "Governor of Zamfara State."),
    # Senate
    _senator("Godswill", "Akpabio", "APC", "Akwa Ibom", 68.0, "Senate President, 10th National Assembly."),
    _senator("Jibrin", "Barau", "APC", "Kano", 62.0, "Deputy Senate President. Senator for Kano North."),
    _senator("Opeyemi", "Bamidele", "APC", "Ekiti", 60.0, "Senate Leader. Senator for Ekiti Central."),
    _senator("Orji", "Kalu", "APC", "Abia", 55.0, "Senate Chief Whip. Former Governor of Abia State.", "Uzor"),
    _senator("Enyinnaya", "Abaribe", "APGA", "Abia", 65.0, "Senator for Abia South."),
    _senator("Tokunbo", "Abiru", "APC", "Lagos", 64.0, "Senator for Lagos East."),
    _senator("Oluremi", "Tinubu", "APC", "Lagos", 66.0, "Senator for Lagos Central."),
    _senator("Ali", "Ndume", "APC", "Borno", 64.0, "Senator for Borno South."),
    _senator("Adams", "Oshiomhole", "APC", "Edo", 62.0, "Senator for Edo North. Former Governor of Edo State."),
    _senator("Ned", "Nwoko", "PDP", "Delta", 58.0, "Senator for Delta North."),
    # House of Representatives
    _rep("Tajudeen", "Abbas", "APC", "Kaduna", 66.0, "Speaker of the House of Representatives."),
    _rep("Benjamin", "Kalu", "APC", "Abia", 64.0, "Deputy Speaker of the House of Representatives."),
    _rep("Julius", "Ihonvbere", "APC", "Edo", 60.0, "House Leader."),
    _rep("Kingsley", "Chinda", "PDP", "Rivers", 58.0, "Minority Leader."),
    _rep("Akin", "Alabi", "APC", "Oyo", 56.0, "Representing Egbeda/Ona-Ara Federal Constituency."),
]
