"""Command-line interface for Keyla."""

import argparse


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="keyla",
        description="Compose a practice typing test from word dictionaries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List the dictionaries found under ./dictionaries/<language>/<name>.txt
  %(prog)s --dictionaries-dir dictionaries --list

  # 50 words from one dictionary, capitalized
  %(prog)s --language english --source common_1k --modifier capitalize --word-count 50

  # Alternate two dictionaries, then mostly (80%%) words from the result
  %(prog)s --source common_1k --merge alternate programming \\
      --merge probabilistic rare_words --probability 0.8 --merge-size 100

  # Reproducible output
  %(prog)s --source common_1k --seed 42

Modifiers: uppercase, lowercase, reverse, capitalize, trim, removeSpaces/noSpaces,
addPrefix:<text>, addSuffix:<text>, limit:<n>
Mergers: alternate, concatenate, randomMix, random, probabilistic, interleaveChunks

Example config.json:
{
  "dictionaries_dir": "~/keyla/dictionaries",
  "file_extension": ".txt",
  "default_language": "english",
  "word_count": 50,
  "verbose": true
}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )
    parser.add_argument("--dictionaries-dir", type=str, help="Root directory of dictionaries")
    parser.add_argument("--file-extension", type=str, help="Dictionary file extension")
    parser.add_argument("--language", type=str, help="Language of the dictionaries")

    # Actions
    parser.add_argument("--list", action="store_true", help="List available dictionaries")

    # Composition
    parser.add_argument("--source", type=str, help="First dictionary of the test")
    parser.add_argument(
        "--merge",
        nargs=2,
        action="append",
        default=[],
        metavar=("MERGER", "DICTIONARY"),
        help="Merge another dictionary into the test (repeatable, applied in order)",
    )
    parser.add_argument(
        "--modifier",
        action="append",
        default=[],
        help="Modifier applied to every word (repeatable, applied in order)",
    )
    parser.add_argument("--word-count", type=int, help="Maximum number of words")
    parser.add_argument("--seed", type=int, help="Seed for reproducible tests")

    # Merger parameters
    parser.add_argument(
        "--probability", type=float, help="probabilistic: chance of drawing from earlier sources"
    )
    parser.add_argument("--merge-size", type=int, help="probabilistic: number of words to draw")
    parser.add_argument("--chunk-size", type=int, help="interleaveChunks: words per chunk")

    # Flags
    parser.add_argument("--log-file", type=str, help="Also write logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")

    return parser
