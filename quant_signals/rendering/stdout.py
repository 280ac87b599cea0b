"""Standard output writer for rendered observations."""

import sys
from typing import Optional, TextIO

from ..models.observation import Observation
from ..signals.series import SignalSeries
from .formatter import render


class StdoutRenderer:
    """Writes rendered observations, one per line, to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None,
                 underline_char: str = "_", underline_width: int = 50):
        self._stream = stream
        self.underline_char = underline_char
        self.underline_width = underline_width

    @property
    def stream(self) -> TextIO:
        # Resolved per call so redirected stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def write_header(self, title: str) -> None:
        """Write a title line followed by an underline."""
        print(title, file=self.stream)
        print(self.underline_char * self.underline_width, file=self.stream, flush=True)

    def write(self, observation: Observation) -> None:
        """Write one rendered observation line."""
        print(render(observation), file=self.stream, flush=True)

    def write_series(self, series: SignalSeries) -> int:
        """
        Write every observation of a series in insertion order.

        Returns:
            Number of lines written
        """
        count = 0
        for observation in series.observations():
            self.write(observation)
            count += 1

        return count
