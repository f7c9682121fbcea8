# Path: pod_verifier/loaders/input_reader.py
"""
Input Reader for POD Verifier

Reads raw record text for the pipeline.

RESPONSIBILITY: Get text from a file, stdin or a share link. No parsing
and no validation happens here; the orchestrator owns that.
"""

import sys
from pathlib import Path
from typing import Optional, TextIO

from ..constants import LOG_INPUT, SHARE_QUERY_PARAM
from ..core.logger import get_input_logger
from ..engine.tools.sharing import extract_record_from_url


STDIN_MARKER = '-'


class InputReader:
    """
    Reads record text from supported sources.

    Example:
        reader = InputReader()
        text = reader.read('record.json')
        text = reader.read('-')  # stdin
    """

    def __init__(self, stdin: Optional[TextIO] = None):
        """
        Initialize input reader.

        Args:
            stdin: Stream used for '-' (defaults to sys.stdin)
        """
        self.stdin = stdin
        self.logger = get_input_logger('input_reader')

    def read(self, source: str) -> str:
        """
        Read record text from a path or '-' for stdin.

        Args:
            source: File path or '-'

        Returns:
            Raw text, undecoded characters replaced

        Raises:
            FileNotFoundError: If the file does not exist
            IsADirectoryError: If the path is a directory
        """
        if source == STDIN_MARKER:
            return self.read_stdin()
        return self.read_file(Path(source))

    def read_file(self, path: Path) -> str:
        """Read a record file as UTF-8."""
        if not path.exists():
            raise FileNotFoundError(f"Record file not found: {path}")
        if path.is_dir():
            raise IsADirectoryError(f"Expected a file, got a directory: {path}")

        text = path.read_text(encoding='utf-8', errors='replace')
        self.logger.info(f"{LOG_INPUT} Read {len(text)} characters from {path}")
        return text

    def read_stdin(self) -> str:
        """Read all of stdin."""
        stream = self.stdin if self.stdin is not None else sys.stdin
        text = stream.read()
        self.logger.info(f"{LOG_INPUT} Read {len(text)} characters from stdin")
        return text

    def read_share_link(self, url: str, param: str = SHARE_QUERY_PARAM) -> Optional[str]:
        """
        Record text carried by a share link.

        Returns:
            Decoded text, or None if the link carries no valid token
        """
        text = extract_record_from_url(url, param)
        if text is None:
            self.logger.warning(f"{LOG_INPUT} No record found in share link")
        else:
            self.logger.info(f"{LOG_INPUT} Decoded {len(text)} characters from share link")
        return text


__all__ = ['InputReader', 'STDIN_MARKER']
