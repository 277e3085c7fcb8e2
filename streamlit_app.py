import logging

import streamlit as st

from social_share.config import load_config
from social_share.models import CallToAction, Tone
from social_share.service import handle_generate


logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)

TONE_HELP = {
    Tone.PROFESSIONAL: "Consultative and polished, perfect for B2B updates.",
    Tone.CASUAL: "Friendly tone for approachable brand voices.",
    Tone.ENTHUSIASTIC: "High-energy storytelling to spark excitement.",
    Tone.AUTHORITATIVE: "Insight-driven with an expert point of view.",
    Tone.PLAYFUL: "Light-hearted copy with personality.",
}

CTA_LABELS = {
    CallToAction.READ_NOW: "Read now",
    CallToAction.LEARN_MORE: "Learn more",
    CallToAction.JOIN_CONVERSATION: "Join the conversation",
    CallToAction.SUBSCRIBE: "Subscribe",
    CallToAction.CONTACT: "Talk to us",
}

if 'share_result' not in st.session_state:
    st.session_state.share_result = None

st.title("Auto-share your blog to every social feed")
st.write(
    "Drop a blog link or paste your draft. We build platform-ready copy for "
    "X, LinkedIn, Facebook, and Instagram in one click."
)

blog_url = st.text_input(
    "Blog URL",
    placeholder="https://yourdomain.com/blog/post",
    help="We'll fetch the article automatically. If the site blocks fetches, paste the summary below instead.",
)
col1, col2 = st.columns(2)
with col1:
    fallback_title = st.text_input("Title override (optional)", placeholder="Custom headline for social posts")
with col2:
    audience = st.text_input("Audience focus (optional)", placeholder="Example: SaaS marketers, product leads")

custom_summary = st.text_area(
    "Summary or key points (optional)",
    height=180,
    placeholder="Paste a short summary if the blog is not publicly accessible.",
)

col3, col4 = st.columns(2)
with col3:
    tone = st.selectbox("Tone", list(Tone), format_func=lambda item: item.value.title())
    st.caption(TONE_HELP[tone])
with col4:
    call_to_action = st.selectbox("Call to action", list(CallToAction), format_func=lambda item: CTA_LABELS[item])

hashtags_input = st.text_area("Custom hashtags (comma or newline separated)", height=80)
parsed_hashtags = [
    tag.replace("#", "").strip()
    for tag in hashtags_input.replace("\n", ",").split(",")
    if tag.replace("#", "").strip()
]
st.caption(f"{len(parsed_hashtags)} custom hashtag(s)")

if st.button("Generate social posts"):
    with st.spinner("Generating..."):
        response = handle_generate(
            {
                "url": blog_url.strip(),
                "fallbackTitle": fallback_title or None,
                "customSummary": custom_summary or None,
                "tone": tone.value,
                "callToAction": call_to_action.value,
                "audience": audience or None,
                "customHashtags": parsed_hashtags,
            },
            config=load_config(),
        )
    if response.ok:
        st.session_state.share_result = response.body
    else:
        st.session_state.share_result = None
        logger.info("Generation failed with status %s", response.status)
        st.error(response.body.get("message") or "We couldn't generate the social copy. Please try again.")
        for warning in response.body.get("warnings", []):
            st.warning(warning)

if st.session_state.share_result:
    result = st.session_state.share_result
    for warning in result.get("warnings", []):
        st.warning(warning)

    st.markdown(f"### {result['title']}")
    st.caption(result["estimatedReadingTime"])
    st.write(result["summary"])

    st.markdown("### Keywords")
    if result["keywords"]:
        st.write(", ".join(result["keywords"]))
    else:
        st.info("No keywords were extracted.")

    st.markdown("### Social Media Posts")
    for post in result["posts"]:
        st.markdown(f"**{post['platform']}** ({len(post['copy'])} characters)")
        st.code(post["copy"], language=None)
