import pathlib

from loguru import logger

from perfect_hash import (
    HashFinder,
    ParallelRandomizedSearch,
    PerfectHashTable,
    RandomizedSearch,
    RandomSearchConfig,
    SearchConfigLoader,
    SearchReporter,
    estimate_search,
    load_words,
)

_CONFIG_DIR = pathlib.Path(__file__).parent / "configs"
_CONFIG_LOADER = SearchConfigLoader()


def demo_exhaustive_search(
    config_file: str = str(_CONFIG_DIR / "go_keywords.yaml"),
    words_file: str = str(_CONFIG_DIR / "go_keywords.txt"),
) -> None:
    """Walk the whole coefficient space of a YAML-described family."""
    config = _CONFIG_LOADER.load(pathlib.Path(config_file))
    words = load_words(pathlib.Path(words_file))
    family = config.build_family()

    estimate = estimate_search(config.table_size_bits, len(words), family.search_space_size)
    result = HashFinder().search(family, config.table_size_bits, words)
    SearchReporter().report(config_file, len(words), result, family, estimate)

    if result.success:
        table = PerfectHashTable.build(family, config.table_size_bits, words)
        table.verify()
        logger.info("Lookup table verified, load factor {:.2f}", table.load_factor)


def demo_randomized_search(
    config_file: str = str(_CONFIG_DIR / "randomized_keywords.yaml"),
    words_file: str = str(_CONFIG_DIR / "go_keywords.txt"),
    workers: int = 0,
) -> None:
    """Randomized restarts, optionally fanned out to ``workers`` processes."""
    config = _CONFIG_LOADER.load(pathlib.Path(config_file))
    words = load_words(pathlib.Path(words_file))
    family = config.build_family()
    search_config = config.randomized or RandomSearchConfig()

    if workers > 0:
        search = ParallelRandomizedSearch(search_config, workers=workers)
    else:
        search = RandomizedSearch(search_config)
    result = search(family, words)
    SearchReporter().report(config_file, len(words), result, family)


if __name__ == "__main__":
    demo_exhaustive_search()
    demo_randomized_search()
