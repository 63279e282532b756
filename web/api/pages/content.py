"""About and Privacy page content."""

from .schemas import PageResponse, PageSection

CONTACT_EMAIL = "privacy@thepeoplesaffairs.com"

ABOUT = PageResponse(
    title="About The Peoples Affairs",
    subtitle="Nigeria's leading platform for political transparency, accountability, and civic engagement.",
    sections=[
        PageSection(
            title="Our Mission",
            paragraphs=[
                "The Peoples Affairs (TPA) is dedicated to promoting political transparency and "
                "accountability in Nigeria. We provide citizens with objective, data-driven insights "
                "about their elected officials and political candidates, empowering them to make "
                "informed decisions and hold their leaders accountable.",
            ],
        ),
        PageSection(
            title="What We Do",
            items=[
                "Performance Rankings: AI-powered analysis and objective metrics rank politicians on "
                "promise fulfillment, legislative activity, and project completion.",
                "Fact Checking: our AI-powered fact-checker verifies political claims and statements.",
                "Public Polls: regular polls gauge public opinion on political issues and candidates.",
                "Civic Education: our blog and resources explain the political process and citizens' rights.",
            ],
        ),
        PageSection(
            title="Our Values",
            items=[
                "Transparency: open access to political data and unbiased reporting.",
                "Accountability: holding public officials accountable through data-driven analysis.",
                "Civic Engagement: empowering citizens to participate meaningfully in democracy.",
                "Data-Driven: objective metrics and AI to evaluate political performance.",
            ],
        ),
        PageSection(
            title="Our Team",
            items=[
                "Editorial Team (Content & Research): ensures accuracy and objectivity in all our content.",
                "Data Team (Analytics & AI): develops algorithms and analyzes performance metrics.",
                "Engineering Team (Platform Development): builds the technology that powers the platform.",
            ],
        ),
        PageSection(
            title="Our Commitment",
            paragraphs=[
                "We are committed to maintaining the highest standards of journalistic integrity and "
                "data accuracy. Our methodology is transparent, and we continuously improve our "
                "algorithms to provide the most accurate political insights.",
            ],
        ),
    ],
)

PRIVACY = PageResponse(
    title="Privacy Policy",
    updated="January 2024",
    sections=[
        PageSection(
            title="1. Introduction",
            paragraphs=[
                'The Peoples Affairs ("TPA", "we", "us", or "our") respects your privacy and is committed '
                "to protecting your personal data. This privacy policy explains how we collect, use, "
                "disclose, and safeguard your information when you use our services.",
            ],
        ),
        PageSection(
            title="2. Information We Collect",
            paragraphs=["We may collect personal information that you voluntarily provide, and some automatically:"],
            items=[
                "Name and email address (when creating an account)",
                "Phone number (optional)",
                "Comments and feedback you submit",
                "Poll responses and voting history",
                "IP address, browser type and device information",
                "Pages visited, time spent and referring addresses",
            ],
        ),
        PageSection(
            title="3. How We Use Your Information",
            items=[
                "Provide and maintain our services",
                "Personalize your experience",
                "Conduct polls and gather public opinion",
                "Send newsletters and updates (with your consent)",
                "Respond to inquiries and provide support",
                "Analyze usage patterns to improve our platform",
                "Comply with legal obligations",
            ],
        ),
        PageSection(
            title="4. Data Sharing and Disclosure",
            items=[
                "Service Providers: third-party vendors who assist in operating our website",
                "Analytics: aggregated, anonymized data for research and analysis",
                "Legal Requirements: when required by law or to protect our rights",
                "Business Transfers: in connection with a merger, acquisition, or sale of assets",
            ],
            paragraphs=["We do not sell your personal information to third parties."],
        ),
        PageSection(
            title="5. Poll and Voting Data",
            items=[
                "Individual votes are kept confidential",
                "Only aggregated results are publicly displayed",
                "We may use demographic data (if provided) for analysis",
                "Poll participation may be tracked to prevent duplicate voting",
            ],
        ),
        PageSection(
            title="6. Cookies and Tracking Technologies",
            paragraphs=[
                "We use cookies to remember preferences, authenticate users, analyze traffic and deliver "
                "advertisements. Disabling cookies may affect some features of our website.",
            ],
        ),
        PageSection(
            title="7. Data Security",
            paragraphs=[
                "We encrypt data in transit and at rest, run regular security assessments and enforce "
                "access controls. No method of transmission over the Internet is 100% secure.",
            ],
        ),
        PageSection(
            title="8. Your Rights",
            items=[
                "Access: request a copy of your personal data",
                "Correction: request correction of inaccurate data",
                "Deletion: request deletion of your personal data",
                "Opt-out: unsubscribe from marketing communications",
                "Portability: request transfer of your data",
            ],
            paragraphs=[f"To exercise these rights, please contact us at {CONTACT_EMAIL}."],
        ),
        PageSection(
            title="9. Children's Privacy",
            paragraphs=[
                "Our services are not directed to individuals under 18 years of age. We do not knowingly "
                "collect personal information from children.",
            ],
        ),
        PageSection(
            title="10. Third-Party Links",
            paragraphs=[
                "Our website may contain links to third-party websites. We are not responsible for the "
                "privacy practices or content of these external sites.",
            ],
        ),
        PageSection(
            title="11. Changes to This Policy",
            paragraphs=[
                'We may update this policy from time to time and will post changes on this page with a new "Last updated" date.',
            ],
        ),
        PageSection(
            title="12. Contact Us",
            paragraphs=[f"Email: {CONTACT_EMAIL}", "Address: Lagos, Nigeria"],
        ),
    ],
)
