"""Main entry point for keyla package."""

import argparse
import random
import sys

from loguru import logger

from keyla.cli import create_parser
from keyla.composition import TestComposer, create_merger, resolve_modifiers
from keyla.composition.merging import merger_parameters
from keyla.core import AppConfig, DictionaryNotFound, KeylaError, load_config
from keyla.dictionary import FileDictionaryLoader, FileDictionaryRepository
from keyla.dictionary.repository import DictionaryRepository
from keyla.utils.logging import add_log_file_handler, setup_logger

# CLI flag backing each merger parameter
_MERGER_PARAM_FLAGS = {
    "probability": "probability",
    "size": "merge_size",
    "chunk_size": "chunk_size",
}


def _merger_params(merger: str, args: argparse.Namespace) -> dict:
    params = {}
    for param in merger_parameters(merger):
        value = getattr(args, _MERGER_PARAM_FLAGS[param], None)
        if value is not None:
            params[param] = value
    return params


def _list_dictionaries(repository: DictionaryRepository) -> None:
    dictionaries = repository.get_all_dictionaries()
    if not dictionaries:
        logger.warning("No dictionaries found")
        return
    for dictionary in dictionaries:
        print(f"{dictionary.language}/{dictionary.name}")


def _compose(config: AppConfig, args: argparse.Namespace, repository: DictionaryRepository) -> list:
    rng = random.Random(config.seed)
    language = config.default_language

    def find(name: str):
        dictionary = repository.get_dictionary_by_language_and_name(language, name)
        if dictionary is None:
            raise DictionaryNotFound(language, name)
        return dictionary

    modifiers = resolve_modifiers(args.modifier)
    mergers = [
        (create_merger(merger, _merger_params(merger, args), rng), name)
        for merger, name in args.merge
    ]

    composer = TestComposer().use_loader(FileDictionaryLoader()).use_source(find(args.source))
    for merger, name in mergers:
        composer = composer.merge_with(merger, find(name))
    for modifier in modifiers:
        composer = composer.use_modifier(modifier)
    composer = composer.limit_words(config.word_count)

    return composer.build(rng).words


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Load configuration
    try:
        config = load_config(args.config, args, parser)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, verbose=config.verbose, debug=config.debug)

    # Print startup banner
    if config.verbose:
        logger.info("=" * 60)
        logger.info("Keyla - Typing Test Composer")
        logger.info("=" * 60)
        logger.info("")

    # Validate
    if not args.list and not args.source:
        parser.error("Must specify either --list or --source")
    if args.merge and not args.source:
        parser.error("--merge requires --source")

    # Print configuration summary
    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Dictionaries: {config.dictionaries_dir}")
        logger.info(f"  Language: {config.default_language}")
        logger.info(f"  Word count: {config.word_count}")
        if config.seed is not None:
            logger.info(f"  Seed: {config.seed}")
        logger.info("")

    repository = FileDictionaryRepository(
        config.dictionaries_dir,
        file_extension=config.file_extension,
        auto_create=config.auto_create_directories,
    )

    if args.list:
        _list_dictionaries(repository)
        return 0

    try:
        words = _compose(config, args, repository)
    except KeylaError as e:
        logger.error(f"✗ {e.message}")
        return 1

    print(" ".join(str(word) for word in words))
    if config.verbose:
        logger.info("")
        logger.info(f"✓ Composed {len(words)} words")
    return 0


if __name__ == "__main__":
    sys.exit(main())
