"""Command-line interface for whisper-srt.

WHY: The tool is run from shell scripts over folders of Whisper JSON
output. The CLI runs the whole pipeline for each file behind one command
and keeps going when one file is bad.

HOW: argparse accepts one or more inputs (JSON files or directories of
them), a preset, output formats and an output directory. Each file is
converted independently; output is written only after every formatter
succeeded for that file.

RULES:
- Output naming: {stem}{suffix} next to the input, or in --output-dir.
  The default SRT output is the input path with ".json" replaced by ".srt".
- Existing output files are overwritten.
- Directories expand to their *.json files, sorted by name.
- Exit codes: 0 = every file converted, 1 = at least one file failed,
  2 = usage error (bad flags, unknown preset/format, bad config).
- Status and errors go to stderr; --echo prints SRT blocks to stdout.
- Failure messages start with the failure kind (MalformedInput, ...).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from whisper_srt import __version__
from whisper_srt.adapters.whisper_json import load_transcript
from whisper_srt.config import log_level, resolve_config
from whisper_srt.core.errors import TranscriptError
from whisper_srt.core.segmenter import segment_words
from whisper_srt.core.stream import build_word_stream
from whisper_srt.formatters import FORMATTERS
from whisper_srt.formatters.base import FormatterOutput
from whisper_srt.formatters.srt import format_block
from whisper_srt.presets import PRESETS

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr."""
    print(msg, file=sys.stderr, flush=True)


def expand_inputs(paths: List[str]) -> List[Path]:
    """Expand directories to their JSON files; keep other paths as given.

    Missing paths are kept so that they fail (and are reported) per file.
    """
    result: List[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            found = sorted(p for p in path.glob("*.json") if p.is_file())
            if not found:
                logger.warning("No .json files in %s", path)
            result.extend(found)
        else:
            result.append(path)
    return result


def _save_output(output: FormatterOutput, stem: str, output_dir: Path) -> Path:
    path = output_dir / "{}{}".format(stem, output.suffix)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(output.content)
    return path


def convert_file(
    input_path: Path,
    cfg: Dict[str, Any],
    format_keys: List[str],
    output_dir: Optional[Path] = None,
    echo: bool = False,
) -> List[Path]:
    """Convert one transcript file and write every requested output.

    Args:
        input_path: Whisper JSON file.
        cfg: Resolved segmentation config.
        format_keys: Keys into FORMATTERS.
        output_dir: Target directory; defaults to the input's directory.
        echo: Also print the SRT blocks to stdout.

    Returns:
        Paths of the written files.

    Raises:
        TranscriptError: The transcript is malformed or has bad timestamps.
        OSError: The input cannot be read or an output cannot be written.
    """
    segments = load_transcript(input_path)
    words = build_word_stream(segments)
    lines = segment_words(words, cfg)
    if not lines:
        logger.info("%s: empty transcript, writing empty output", input_path.name)

    # Format everything before writing, so a formatter failure writes nothing.
    outputs: List[FormatterOutput] = []
    for key in format_keys:
        outputs.extend(FORMATTERS[key]().format(lines))

    if echo:
        for line in lines:
            sys.stdout.write(format_block(line))
        sys.stdout.flush()

    target_dir = output_dir if output_dir is not None else input_path.parent
    saved = [_save_output(output, input_path.stem, target_dir) for output in outputs]
    logger.info(
        "%s: %d words -> %d lines (%s)",
        input_path.name, len(words), len(lines), ", ".join(p.name for p in saved),
    )
    return saved


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="whisper-srt",
        description="Re-segment word-timestamped Whisper JSON transcripts into "
                    "SRT subtitles with readable line lengths.",
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        metavar="INPUT",
        help="Whisper JSON file, or a directory of them.",
    )
    parser.add_argument(
        "--preset",
        default=None,
        help="Line limit preset. Available: {} (default: $WHISPER_SRT_PRESET "
             "or standard).".format(", ".join(PRESETS)),
    )
    parser.add_argument(
        "--formats",
        default="srt",
        help="Comma-separated output formats. Available: {} "
             "(default: %(default)s).".format(", ".join(sorted(FORMATTERS))),
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for output files (default: next to each input).",
    )
    parser.add_argument(
        "--echo",
        action="store_true",
        help="Also print the generated SRT blocks to stdout.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging (shows every forced line break).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``whisper-srt`` and ``python -m whisper_srt``.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        level = logging.DEBUG if args.verbose else log_level()
        cfg = resolve_config(args.preset)
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    format_keys = [f.strip().lower() for f in args.formats.split(",") if f.strip()]
    unknown = [key for key in format_keys if key not in FORMATTERS]
    if unknown or not format_keys:
        parser.error(
            "Unknown format '{}'. Available formats: {}".format(
                ",".join(unknown), ", ".join(sorted(FORMATTERS))
            )
        )

    output_dir: Optional[Path] = None
    if args.output_dir:
        output_dir = Path(args.output_dir)
        if not output_dir.is_dir():
            parser.error("Output directory does not exist: {}".format(output_dir))

    inputs = expand_inputs(args.inputs)
    logger.debug("Config: %s", cfg)

    failed = 0
    for input_path in inputs:
        try:
            saved = convert_file(input_path, cfg, format_keys, output_dir, echo=args.echo)
        except TranscriptError as e:
            failed += 1
            _status("Error: {}: {}".format(input_path, e))
        except OSError as e:
            failed += 1
            _status("Error: {}: {}: {}".format(input_path, type(e).__name__, e))
        else:
            for path in saved:
                _status("Wrote {}".format(path))

    if len(inputs) > 1:
        _status("{} of {} file(s) converted".format(len(inputs) - failed, len(inputs)))

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
