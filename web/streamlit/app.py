"""The Peoples Affairs Dashboard."""

import sys
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import httpx  # noqa: E402
import plotly.graph_objects as go  # noqa: E402
import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from app.container import container  # noqa: E402
from app.services.voting import NotAuthenticatedError  # noqa: E402
from civic_client import ApiError  # noqa: E402
from web.api import analysis, auth, blogs, factcheck, pages, politicians, polls, rankings, voting  # noqa: E402
from web.api.errors import ValidationError  # noqa: E402

# Ensure container is initialized
container.init()

st.set_page_config(page_title="The Peoples Affairs", page_icon="🇳🇬", layout="wide")

BAND_COLORS = {
    "good": "#16A34A",
    "fair": "#CA8A04",
    "poor": "#DC2626",
}

VERDICT_ICONS = {
    "true": "✅",
    "mostly-true": "🟢",
    "half-true": "🟡",
    "mostly-false": "🟠",
    "false": "❌",
    "unverifiable": "❔",
}


@st.cache_data(ttl=3600, show_spinner=False)
def get_offices():
    """Get offices from DB."""
    return [o.model_dump() for o in rankings.get_offices().items]


@st.cache_data(ttl=3600, show_spinner=False)
def get_ranking(office_id: str):
    logger.info("Loading ranking for {}", office_id)
    return [r.model_dump() for r in rankings.get_office_ranking(office_id).items]


@st.cache_data(ttl=600, show_spinner="Loading analysis...")
def get_breakdown(politician_id: str):
    """Score breakdown via API; None when unavailable."""
    resp = analysis.get_score_breakdown(politician_id)
    return resp.model_dump() if resp else None


@st.cache_data(ttl=3600, show_spinner=False)
def get_methodology():
    resp = analysis.get_methodology()
    return resp.model_dump() if resp else None


def breakdown_chart(metrics: list) -> go.Figure:
    return go.Figure(
        go.Bar(
            x=[m["value"] for m in metrics],
            y=[f"{m['name']} ({m['weight']})" for m in metrics],
            orientation="h",
            marker_color=[BAND_COLORS[m["band"]] for m in metrics],
            text=[f"{m['value']:.0f}" for m in metrics],
            textposition="outside",
        )
    ).update_layout(
        xaxis=dict(range=[0, 110]),
        yaxis=dict(autorange="reversed"),
        margin=dict(t=20, b=20, l=200, r=20),
        height=320,
    )


def comparison_chart(ranking: list) -> go.Figure:
    return go.Figure(
        go.Bar(
            x=[r["name"] for r in ranking],
            y=[r["score"] for r in ranking],
            text=[f"{r['score']:.1f}" for r in ranking],
            textposition="outside",
        )
    ).update_layout(yaxis=dict(range=[0, 110]), margin=dict(t=20, b=40, l=40, r=20), height=350)


def login_sidebar():
    """Login form or current user in the sidebar."""
    session = auth.get_session()
    st.sidebar.markdown("---")

    if session.authenticated:
        st.sidebar.markdown(f"Signed in as **{session.name or session.email}**")
        if st.sidebar.button("Logout"):
            auth.logout()
            st.rerun()
        return

    with st.sidebar.form("login"):
        st.markdown("**Login**")
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        if st.form_submit_button("Login"):
            try:
                auth.login(email, password)
                st.rerun()
            except ValidationError as e:
                st.error(e.message)


def factcheck_page():
    """Published fact checks and the AI claim checker."""
    st.subheader("🔎 Fact Check")

    data = factcheck.list_fact_checks()
    cols = st.columns(4)
    cols[0].metric("Total Checks", data.stats.total)
    cols[1].metric("True", data.stats.true)
    cols[2].metric("False", data.stats.false)
    cols[3].metric("Mixed", data.stats.mixed)

    with st.expander("🤖 Check a claim with AI", expanded=False):
        claim = st.text_area("Enter a political claim", max_chars=1000)
        if st.button("Analyze claim"):
            try:
                with st.spinner("Analyzing..."):
                    result = factcheck.analyze_claim(claim)
            except ValidationError as e:
                st.warning(e.message)
            else:
                if result is None:
                    st.error("Fact-check service unavailable. Please try again later.")
                else:
                    st.markdown(
                        f"{VERDICT_ICONS[result.verdict]} **{result.verdict_label}** "
                        f"({result.confidence:.0f}% confidence)"
                    )
                    st.write(result.summary)
                    for point in result.key_points:
                        st.write(f"- {point}")
                    if result.disclaimer:
                        st.caption(result.disclaimer)
                    st.code(result.export_text, language=None)

    col1, col2, col3 = st.columns([2, 1, 1])
    query = col1.text_input("Search claims or people")
    verdict = col2.selectbox("Verdict", ["", *VERDICT_ICONS], format_func=lambda v: v or "All verdicts")
    category = col3.selectbox("Category", ["", *data.categories], format_func=lambda c: c or "All categories")

    items = factcheck.list_fact_checks(query, verdict or None, category or None).items
    if not items:
        st.info("No fact checks match your filters.")
        return

    for fc in items:
        with st.container(border=True):
            st.markdown(f"{VERDICT_ICONS[fc.verdict]} **{fc.verdict_label}** · {fc.category} · {fc.date:%b %d, %Y}")
            st.markdown(f"**\"{fc.claim}\"**")
            st.caption(f"{fc.claimant}, {fc.claimant_role}")
            st.write(fc.summary)
            st.caption(f"{fc.sources} sources · {fc.views:,} views · {fc.shares:,} shares")


def vote_buttons(item: dict):
    """Up/down buttons for one votable item, tally kept in session state."""
    key = f"tally_{item['kind']}_{item['id']}"
    tally = st.session_state.setdefault(key, {"up": item["up"], "down": item["down"], "own": None})

    col1, col2, col3 = st.columns([6, 1, 1])
    col1.markdown(f"**{item['title']}**" + (f" · {item['status']}" if item["status"] else ""))
    for col, direction, icon in ((col2, "up", "👍"), (col3, "down", "👎")):
        label = f"{icon} {tally[direction]}"
        if col.button(label, key=f"{key}_{direction}", type="primary" if tally["own"] == direction else "secondary"):
            try:
                resp = voting.cast_vote(item["kind"], item["id"], direction, **tally)
                st.session_state[key] = {"up": resp.up, "down": resp.down, "own": resp.own}
                st.rerun()
            except NotAuthenticatedError as e:
                st.warning(e.message)
            except (ApiError, httpx.HTTPError) as e:
                logger.warning("Vote failed: {}", e)
                st.error("Vote failed. Please try again.")


def politicians_page():
    """Browse politicians with filters and a score breakdown."""
    st.subheader("👥 Politicians")

    options = politicians.list_politicians()
    col1, col2, col3 = st.columns(3)
    state = col1.selectbox("State", ["", *options.states], format_func=lambda s: s or "All states")
    party = col2.selectbox("Party", ["", *options.parties], format_func=lambda p: p or "All parties")
    office = col3.selectbox("Office", ["", *options.offices], format_func=lambda o: o or "All offices")

    data = politicians.list_politicians(state or None, party or None, office or None)
    st.caption(f"Showing {len(data.items)} of {data.total} politicians")
    if not data.items:
        st.info("No politicians match your filters.")
        return

    names = {p.id: f"{p.name} ({p.office or 'No office'}, {p.party or 'Independent'})" for p in data.items}
    selected = st.selectbox("Select a politician", list(names), format_func=names.get)
    politicians.select_politician(selected)

    breakdown = get_breakdown(selected)
    if breakdown is None:
        st.warning("Analysis unavailable.")
    else:
        st.metric("Performance Score", f"{breakdown['performance_score']:.1f}")
        st.plotly_chart(breakdown_chart(breakdown["metrics"]), width="stretch")
        col1, col2 = st.columns(2)
        if breakdown["strengths"]:
            col1.markdown("**Strengths**\n" + "\n".join(f"- {s}" for s in breakdown["strengths"]))
        if breakdown["weaknesses"]:
            col2.markdown("**Weaknesses**\n" + "\n".join(f"- {w}" for w in breakdown["weaknesses"]))
        if breakdown["recommendation"]:
            st.info(breakdown["recommendation"])

    items = voting.get_votable_items(selected)
    if items is None:
        st.caption("Projects, promises and controversies unavailable.")
        return
    for kind, title in (("project", "🏗️ Projects"), ("promise", "🤝 Promises"), ("controversy", "⚠️ Controversies")):
        group = [i.model_dump() for i in items.items if i.kind == kind]
        if group:
            st.markdown(f"#### {title}")
            for item in group:
                vote_buttons(item)


def compare_page():
    """Side-by-side comparison of politicians."""
    st.subheader("⚖️ Compare")

    data = politicians.list_politicians()
    names = {p.id: p.name for p in data.items}
    selected = st.multiselect("Politicians to compare", list(names), format_func=names.get, max_selections=4)

    if st.button("Compare", disabled=len(selected) < 2):
        try:
            resp = compare_politicians(selected)
        except ValidationError as e:
            st.warning(e.message)
            return
        if resp is None:
            st.error("Comparison unavailable.")
            return
        cols = st.columns(3)
        cols[0].metric("Highest", resp["highest"]["name"], f"{resp['highest']['score']:.1f}")
        cols[1].metric("Lowest", resp["lowest"]["name"], f"{resp['lowest']['score']:.1f}")
        cols[2].metric("Average Score", f"{resp['average_score']:.1f}")
        st.plotly_chart(comparison_chart(resp["ranking"]), width="stretch")

    methodology = get_methodology()
    if methodology:
        with st.expander("📐 Scoring methodology"):
            st.write(methodology["overview"])
            for f in methodology["factors"]:
                st.write(f"- **{f['factor']}** ({f['weight']}): {f['description']}")
            if methodology["disclaimer"]:
                st.caption(methodology["disclaimer"])


def compare_politicians(ids: list[str]):
    resp = analysis.compare_politicians(ids)
    return resp.model_dump() if resp else None


def rankings_page():
    """Per-office rankings from the local database."""
    st.subheader("🏆 Rankings")

    offices = get_offices()
    if not offices:
        st.warning("No offices found. Run 'python seed_data.py' first.")
        return

    by_id = {o["id"]: o["name"] for o in offices}
    office_id = st.selectbox("Office", list(by_id), format_func=by_id.get)
    ranking = get_ranking(office_id)
    if not ranking:
        st.info("No rankings for this office yet.")
        return

    st.dataframe(
        [
            {
                "Rank": r["rank"],
                "Name": r["name"],
                "Party": r["party"],
                "State": r["region"],
                "Score": round(r["total_score"], 1),
            }
            for r in ranking
        ],
        hide_index=True,
        width="stretch",
    )


def poll_results(poll):
    for option in poll.options:
        st.progress(option.percentage / 100, text=f"{option.text} · {option.votes:,} votes ({option.percentage:g}%)")


def polls_page():
    """Public opinion polls."""
    st.subheader("🗳️ Polls")

    data = polls.list_polls()
    cols = st.columns(3)
    cols[0].metric("Active Polls", data.stats.active)
    cols[1].metric("Total Votes", f"{data.stats.total_votes:,}")
    cols[2].metric("Polls Voted", data.stats.voted)

    if data.featured:
        with st.container(border=True):
            st.markdown(f"⭐ **{data.featured.title}**")
            st.write(data.featured.description)
            poll_results(data.featured)

    col1, col2, col3 = st.columns([2, 1, 1])
    query = col1.text_input("Search polls")
    category = col2.selectbox("Category", ["", *data.categories], format_func=lambda c: c or "All categories")
    status = col3.selectbox("Status", ["", *data.statuses], format_func=lambda s: s.title() if s else "All statuses")

    items = polls.list_polls(query, category or None, status or None).items
    if not items:
        st.info("No polls match your filters.")
        return

    for poll in items:
        with st.container(border=True):
            voted = " · ✔️ Voted" if poll.has_voted else ""
            st.markdown(f"**{poll.title}** · {poll.category} · {poll.status.title()}{voted}")
            st.caption(f"{poll.start_date:%b %d, %Y} to {poll.end_date:%b %d, %Y} · {poll.total_votes:,} votes")
            st.write(poll.description)
            poll_results(poll)


@st.cache_data(ttl=600, show_spinner="Loading posts...")
def get_posts(query: str, category: str | None):
    resp = blogs.list_posts(query, category)
    return resp.model_dump() if resp else None


def blog_page():
    """Published blog posts."""
    st.subheader("📰 The TPA Blog")
    st.markdown(
        "*Stay informed with in-depth analysis, news, and insights about Nigerian politics and governance.*"
    )

    data = get_posts("", None)
    if data is None:
        st.error("Blog unavailable. Please try again later.")
        return

    cols = st.columns(3)
    cols[0].metric("Articles", data["stats"]["posts"])
    cols[1].metric("Total Views", f"{data['stats']['total_views']:,}")
    cols[2].metric("Categories", data["stats"]["categories"])

    featured = data["featured"]
    if featured:
        with st.container(border=True):
            st.markdown(f"⭐ **{featured['title']}**")
            st.caption(f"{featured['category']} · {featured['author']} · {featured['read_time']} min read")
            st.write(featured["excerpt"])

    main_col, side_col = st.columns([3, 1])
    with side_col:
        st.markdown("#### 🔥 Popular")
        for post in data["popular"]:
            st.write(f"- {post['title']} ({post['views']:,} views)")

    with main_col:
        query = st.text_input("Search posts")
        category = st.selectbox("Category", ["", *data["categories"]], format_func=lambda c: c or "All categories")
        data = get_posts(query, category or None) if query or category else data
        if data is None:
            st.error("Blog unavailable. Please try again later.")
            return

        if not data["items"]:
            st.info("No posts match your filters.")
            return
        for post in data["items"]:
            with st.container(border=True):
                published = f" · {post['published_at']:%b %d, %Y}" if post["published_at"] else ""
                st.markdown(f"**{post['title']}**")
                st.caption(f"{post['category']} · {post['author']}{published} · {post['read_time']} min read")
                st.write(post["excerpt"])
                if st.button("Read", key=f"read_{post['slug']}"):
                    full = blogs.get_post(post["slug"])
                    if full is None:
                        st.error("Post unavailable.")
                    else:
                        st.markdown(full.content or full.excerpt)


def static_page(page):
    st.subheader(page.title)
    if page.subtitle:
        st.markdown(f"*{page.subtitle}*")
    if page.updated:
        st.caption(f"Last updated: {page.updated}")
    for section in page.sections:
        st.markdown(f"#### {section.title}")
        for paragraph in section.paragraphs:
            st.write(paragraph)
        for item in section.items:
            st.write(f"- {item}")


PAGES = {
    "🔎 Fact Check": factcheck_page,
    "👥 Politicians": politicians_page,
    "⚖️ Compare": compare_page,
    "🏆 Rankings": rankings_page,
    "🗳️ Polls": polls_page,
    "📰 Blog": blog_page,
    "ℹ️ About": lambda: static_page(pages.get_about()),
    "🔒 Privacy": lambda: static_page(pages.get_privacy()),
}


def main():
    st.title("🇳🇬 The Peoples Affairs")
    st.markdown("*Political transparency, accountability and civic engagement*")

    page = st.sidebar.radio("Navigate", list(PAGES))
    login_sidebar()

    PAGES[page]()

    # Footer
    st.sidebar.markdown("---")
    st.sidebar.markdown("**Contact:** privacy@thepeoplesaffairs.com")


if __name__ == "__main__":
    main()
