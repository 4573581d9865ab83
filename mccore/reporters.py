"""Reporter implementations for console output."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from .potentials.base import PairwiseResult
    from .potentials.lj import LennardJonesCut


class BannerReporter:
    """
    Writes the model description at the start of a run and a closing line.

    Labels are left-justified in a fixed column so values line up.
    """

    def __init__(self, file: TextIO | None = None, label_width: int = 39) -> None:
        """
        Initialize banner reporter.

        Args:
            file: Output file (defaults to stdout).
            label_width: Width of the label column.
        """
        self._file = file if file is not None else sys.stdout
        self._label_width = label_width

    def introduction(self, potential: LennardJonesCut) -> None:
        """Write the potential name and its parameters."""
        self._file.write(potential.name + "\n")
        for label, value in potential.describe():
            self._file.write(f"{label + ' = ':<{self._label_width}}{value:15.5f}\n")

    def conclusion(self) -> None:
        """Write the closing line."""
        self._file.write("Program ends\n")


class ResultReporter:
    """
    Writes one line per reported PairwiseResult.

    Overlapped results are written with the word "overlap" instead of
    numbers, since their energy and virial are meaningless.
    """

    def __init__(
        self,
        file: TextIO | None = None,
        separator: str = "\t",
    ) -> None:
        """
        Initialize result reporter.

        Args:
            file: Output file (defaults to stdout).
            separator: Field separator.
        """
        self._file = file if file is not None else sys.stdout
        self._separator = separator
        self._header_written = False

    def report(self, label: str, result: PairwiseResult) -> None:
        """Write a labelled result, preceded by a header on first use."""
        if not self._header_written:
            headers = ["Label", "Energy", "Virial"]
            self._file.write(self._separator.join(headers) + "\n")
            self._header_written = True

        if result.overlap:
            values = [label, "overlap", "overlap"]
        else:
            values = [label, f"{result.energy:.6f}", f"{result.virial:.6f}"]
        self._file.write(self._separator.join(values) + "\n")
