"""Command-line front end: explain, summarize, or quiz from the terminal."""
from __future__ import annotations
import argparse
import asyncio
import logging
import sys

from study_assistant.common.config import load_settings
from study_assistant.common.logging_setup import setup_logging
from study_assistant.gateway.errors import GatewayError, InvalidRequestError
from study_assistant.gateway.gemini_gateway import AIGateway
from study_assistant.views.diagram import extract_diagram

LOGGER = logging.getLogger("study_assistant.cli")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="study-assistant", description="AI study helper backed by Gemini")
    ap.add_argument("--cfg", default=None, help="Config path (default: STUDY_CONFIG or configs/study_assistant.yaml)")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("explain", help="Explain a doubt")
    p.add_argument("--text", required=True, help="The doubt to explain")

    p = sub.add_parser("summarize", help="Condense notes into bullet points")
    p.add_argument("--text", required=True, help="Notes to summarize")

    p = sub.add_parser("quiz", help="Generate a multiple-choice quiz")
    p.add_argument("--text", required=True, help="Source passage")
    p.add_argument("--count", type=int, default=5, help="Number of questions (1-10)")
    return ap


async def run(gateway: AIGateway, args: argparse.Namespace) -> str:
    """Run one subcommand and return what should be printed."""
    if args.command == "explain":
        result = extract_diagram(await gateway.explain(args.text))
        if result.diagram:
            return f"{result.text}\n\n--- diagram (mermaid) ---\n{result.diagram}"
        return result.text
    if args.command == "summarize":
        return await gateway.summarize(args.text)

    questions = await gateway.generate_quiz(args.text, args.count)
    lines = []
    for n, q in enumerate(questions, start=1):
        lines.append(f"{n}. {q.question}")
        lines.extend(f"   {chr(65 + i)}) {opt}" for i, opt in enumerate(q.options))
        lines.append(f"   Answer: {q.correct_answer}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    try:
        gateway = AIGateway.from_settings(load_settings(args.cfg))
        print(asyncio.run(run(gateway, args)))
    except InvalidRequestError as e:
        print(e.message, file=sys.stderr)
        return 2
    except GatewayError as e:
        LOGGER.debug("Command %s failed", args.command, exc_info=True)
        print(e.message, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
