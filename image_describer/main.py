"""Entry point — wires Config → OpenAIVisionClient → terminal output."""
import asyncio
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from image_describer.config import Config
from image_describer.constants import MSG_ERROR_PREFIX, MSG_PROCESSING
from image_describer.vision.errors import AnalysisFailure
from image_describer.vision.openai import OpenAIVisionClient

console = Console()


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


async def _describe(config: Config, image_bytes: bytes, prompt: str | None) -> str:
    async with OpenAIVisionClient(
        config.openai_api_key,
        base_url=config.openai_base_url,
        model=config.vision_model,
        max_tokens=config.vision_max_tokens,
        default_prompt=config.default_prompt,
    ) as client:
        with console.status(MSG_PROCESSING):
            return await client.analyze(image_bytes, prompt)


@click.command()
@click.argument(
    "image",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--prompt",
    "-p",
    default=None,
    help="Question to ask about the image (default: VISION_PROMPT or 'Describe this image')",
)
def main(image: Path, prompt: str | None) -> None:
    """Describe IMAGE using a vision-capable chat completion model."""
    try:
        config = Config.from_env()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    _setup_logging(config.log_level)

    try:
        text = asyncio.run(_describe(config, image.read_bytes(), prompt))
    except AnalysisFailure as exc:
        logging.getLogger(__name__).debug("Image analysis failed", exc_info=True)
        console.print(f"[bold red]{MSG_ERROR_PREFIX}[/] {escape(str(exc))}")
        raise SystemExit(1) from exc

    console.print(escape(text))


if __name__ == "__main__":
    main()
