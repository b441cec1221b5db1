"""
tagcloud/__init__.py - Tag Cloud Pipeline

Coordinates one run of the generator:
- Reading the input file line by line
- Counting case-sensitive word frequencies
- Selecting the top N words and ordering them alphabetically
- Rendering and writing the HTML page (and optional JSON report)

Key role: High-level coordinator that ties together the pipeline stages
"""

import os

from utils import get_logger
from tagcloud.tokenizer import build_separators
from tagcloud.source import read_lines
from tagcloud.frequency import count_words
from tagcloud.ranking import select_top_n, validate_size
from tagcloud.render import render_page, render_report, write_files


class TagCloud(object):
    """
    Single-pass tag cloud generator for one input file.

    Nothing is written until the full ranking has been computed, so a
    failed run never leaves a partial page behind.
    """

    def __init__(self, config, input_path, output_path, size, report_path=None,
                 line_source=read_lines):
        """
        Initialize the generator.

        Args:
            config: Configuration object (separators, encodings, stylesheets)
            input_path: Text file to read
            output_path: HTML file to write
            size: Number of words in the cloud
            report_path: Optional JSON report destination
            line_source: Factory for the line iterator (for testing)
        """
        self.config = config
        self.logger = get_logger("TAGCLOUD")
        self.input_path = input_path
        self.output_path = output_path
        self.size = size
        self.report_path = report_path
        self.line_source = line_source
        self.separators = build_separators(config.separators)

    def rank(self):
        """Read and count the input, returning the Ranking (no files written)."""
        # Reject a bad size before any file is touched
        validate_size(self.size)

        lines = self.line_source(self.input_path, encoding=self.config.input_encoding)
        table = count_words(lines, self.separators)
        self.logger.info(
            f"Counted {len(table)} distinct words in {self.input_path}.")

        ranking = select_top_n(table, self.size)
        self.logger.debug(
            f"Selected {ranking.size} words, max count {ranking.max_count}.")
        return ranking

    def run(self):
        """Generate the cloud and write the output files. Returns the Ranking."""
        ranking = self.rank()
        source_name = os.path.basename(self.input_path)

        # Page and report are both rendered before either is written
        files = [(self.output_path, render_page(ranking, source_name, self.config.stylesheets))]
        if self.report_path:
            files.append((self.report_path, render_report(ranking, source_name)))
        write_files(files, self.config.output_encoding)

        self.logger.info(
            f"Wrote tag cloud of {ranking.size} words to {self.output_path}.")
        if self.report_path:
            self.logger.info(f"Wrote report to {self.report_path}.")
        return ranking
