import streamlit as st

from config import config
from utils.logger import app_logger as logger
from weather_agent import WeatherAgent
from weather_agent.agent import EXAMPLE_QUERIES, TOOLS


# ------------------------
# Page config
# ------------------------
st.set_page_config(
    page_title=config.ui.page_title,
    page_icon=config.ui.page_icon,
    layout=config.ui.layout,
)


@st.cache_resource
def get_agent() -> WeatherAgent:
    """One agent per server process; the router is stateless so sessions can share it."""
    logger.info("Creating shared WeatherAgent for the chat page")
    return WeatherAgent()


def submit_query(agent: WeatherAgent, query: str):
    """Answer a query and append both turns to the displayed transcript."""
    query = (query or "").strip()
    if not query:
        return
    response = agent.process_query(query)
    st.session_state.chat_history.append({"role": "user", "text": query})
    st.session_state.chat_history.append({"role": "assistant", "text": response})


def render_sidebar(agent: WeatherAgent):
    with st.sidebar:
        st.subheader("Tools")
        for name, description in TOOLS:
            st.markdown(f"**{name}**: {description}")

        st.subheader("Try asking")
        for i, example in enumerate(EXAMPLE_QUERIES):
            if st.button(example, key=f"example_{i}", use_container_width=True):
                submit_query(agent, example)

        if config.debug:
            with st.expander("Debug Info", expanded=False):
                st.write(f"**Bedrock enabled**: {config.bedrock.enabled}")
                st.write(f"**AWS Region**: {config.bedrock.region}")
                st.write(f"**Model**: {config.bedrock.model_id}")


def render_chat_interface(agent: WeatherAgent):
    """Render the transcript and the input form."""
    st.title(config.ui.page_title)

    if agent.demo_mode:
        st.info("Running in demo mode with simulated AI responses. "
                "Set USE_BEDROCK=true to answer general questions with Bedrock.")

    with st.form("chat_form", clear_on_submit=True):
        input_col, send_col, clear_col = st.columns([8, 1, 1], gap="small")

        with input_col:
            user_q = st.text_input(
                label="Ask about the weather:",
                key="chat_input",
                placeholder="What's the weather in London?",
                label_visibility="collapsed",
            )

        with send_col:
            submitted = st.form_submit_button("→", use_container_width=True, help="Send message")

        with clear_col:
            clear_chat = st.form_submit_button("🗑", use_container_width=True, help="Clear chat")

    if clear_chat:
        st.session_state.chat_history = []
    elif submitted:
        submit_query(agent, user_q)

    if not st.session_state.chat_history:
        st.caption("Ask me about weather, temperature, or rain in any location.")
        return

    for message in st.session_state.chat_history:
        with st.chat_message(message["role"]):
            st.markdown(message["text"])


# ensure session-state chat history exists (display only, never fed back into routing)
if "chat_history" not in st.session_state:
    st.session_state.chat_history = []

agent = get_agent()
render_sidebar(agent)
render_chat_interface(agent)
