import logging

logger = logging.getLogger(__name__)


def load_samples(file_path):

    """
    Reads a text file and returns its lines as samples.

    Args:
        file_path (str): Path to the UTF-8 text file.

    Returns:
        list: One string per line, line terminators removed. Blank lines are kept.
    """

    samples = []

    try:
        with open(file_path, "r", encoding="utf-8") as file:
            for line in file:
                #Drop the line terminator only, inner spacing matters
                samples.append(line.rstrip("\r\n"))

    except FileNotFoundError:
        logger.error("Sample file not found: %s", file_path)
        return []

    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading sample file %s: %s", file_path, e)
        return []

    logger.debug("Loaded %d samples from %s", len(samples), file_path)
    return samples
