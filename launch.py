"""
launch.py - Tag Cloud Generator Entry Point

Main entry point for the tag cloud generator.
Handles configuration loading, prompting for anything not given on
the command line, and running the pipeline.

Usage:
    python launch.py                                  # Prompt for everything
    python launch.py --input a.txt --output a.html --size 50
    python launch.py --config_file path               # Use custom config file
    python launch.py ... --report a.json              # Also write a JSON summary
"""

import sys
from configparser import ConfigParser, Error as ConfigParserError
from argparse import ArgumentParser

from utils import get_logger
from utils.config import Config
from tagcloud import TagCloud
from tagcloud.errors import InvalidArgument


def prompt(message, reader=input):
    return reader(message).strip()


def main(config_file, input_path=None, output_path=None, size=None, report_path=None,
         reader=input):
    """
    Run the tag cloud generator.

    Args:
        config_file: Path to configuration file (default: config.ini)
        input_path, output_path, size: Prompted for when None
        report_path: Optional JSON report destination
        reader: Prompt function (for testing)

    Returns:
        Process exit status: 0 on success, 1 on a reported error
    """
    logger = get_logger("LAUNCH")

    # Load configuration
    try:
        cparser = ConfigParser()
        cparser.read(config_file)
        config = Config(cparser)
    except (ConfigParserError, ValueError) as e:
        logger.error(f"Bad configuration in {config_file}: {e}")
        return 1

    try:
        if input_path is None:
            input_path = prompt("Enter the name of an input file: ", reader)
        if output_path is None:
            output_path = prompt("Enter the name of an output file: ", reader)
        if size is None:
            size = config.size
        if size is None:
            raw_size = prompt("Enter the number of words to be in the tag cloud: ", reader)
            try:
                size = int(raw_size)
            except ValueError:
                logger.error(f"Cloud size must be an integer, got {raw_size!r}.")
                return 1
    except EOFError:
        logger.error("Input ended before all answers were given.")
        return 1

    try:
        TagCloud(config, input_path, output_path, size, report_path).run()
    except InvalidArgument as e:
        logger.error(f"Invalid request: {e}")
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    parser = ArgumentParser()
    parser.add_argument("--config_file", type=str, default="config.ini",
                        help="Path to configuration file")
    parser.add_argument("--input", type=str, default=None,
                        help="Text file to build the cloud from")
    parser.add_argument("--output", type=str, default=None,
                        help="HTML file to write")
    parser.add_argument("--size", type=int, default=None,
                        help="Number of words in the cloud")
    parser.add_argument("--report", type=str, default=None,
                        help="Optional JSON report file")
    args = parser.parse_args()
    sys.exit(main(args.config_file, args.input, args.output, args.size, args.report))
