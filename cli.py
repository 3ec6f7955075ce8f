"""Command-line entry point for the Weather Agent."""

import click

from weather_agent import WeatherAgent
from utils.logger import cli_logger as logger


AGENT_NAME = "Weather Agent"

ENV_HELP = """\b
Environment Variables:
  USE_BEDROCK        Answer general questions with Bedrock (default: false, demo mode)
  AWS_REGION         Bedrock region (default: us-east-1)
  BEDROCK_MODEL_ID   Bedrock model identifier
  LOG_LEVEL          Logging level (default: INFO)
"""


def _warn_demo_mode(agent: WeatherAgent):
    if agent.demo_mode:
        logger.info("USE_BEDROCK is not enabled, using demo mode with mock responses")
        click.echo("WARNING: USE_BEDROCK is not enabled.", err=True)
        click.echo("Running in demo mode with simulated AI responses.", err=True)
        click.echo("Set USE_BEDROCK=true (with AWS credentials) to use Bedrock.\n", err=True)


def run_examples(agent: WeatherAgent):
    click.echo(f"=== {AGENT_NAME} Demo Examples ===\n")
    for query, response in agent.run_examples():
        click.echo(f"Example Query: {query}")
        click.echo(f"Agent Response: {response}")
        click.echo()


def interactive_session(agent: WeatherAgent):
    logger.info("Starting interactive weather agent session")
    click.echo(f"=== {AGENT_NAME} Interactive Session ===")
    click.echo("I'm your weather assistant! Ask me about weather, temperature, or rain in any location.")
    click.echo("Type 'help' for available commands, or 'quit' to exit.\n")

    while True:
        try:
            user_input = click.prompt("You", default="", show_default=False).strip()
        except click.Abort:
            # EOF or Ctrl-C
            click.echo()
            break

        if not user_input:
            continue

        if user_input.lower() in ("quit", "exit"):
            break

        if user_input.lower() == "help":
            click.echo(f"{AGENT_NAME}: {agent.available_tools()}")
            continue

        try:
            response = agent.process_query(user_input)
        except Exception as e:
            logger.error(f"Error processing query: {e}", exc_info=True)
            response = "I apologize, but I encountered an error. Please try again."
        click.echo(f"{AGENT_NAME}: {response}")
        click.echo()

    click.echo(f"{AGENT_NAME}: Goodbye! Have a great day!")
    logger.info("Interactive session ended")


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=ENV_HELP,
)
@click.option("-e", "--examples", is_flag=True, help="Run example queries and exit.")
@click.argument("query", nargs=-1)
def main(examples, query):
    """Ask about the weather, temperature or rain in any location.

    With QUERY, answer it and exit. Without arguments, start an interactive session.
    """
    agent = WeatherAgent()
    _warn_demo_mode(agent)

    if examples:
        run_examples(agent)
        return

    if query:
        click.echo(agent.process_query(" ".join(query)))
        return

    interactive_session(agent)


if __name__ == "__main__":
    main()
