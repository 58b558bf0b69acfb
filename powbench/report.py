# powbench/report.py
#
# Collects the per-strategy timings of one benchmark run and prints them in
# the order they were recorded.

import sys


class Report:
    """
    An ordered collection of (label, elapsed_ms) measurements.

    Example:
        report = Report()
        report.add("Traditional loop", 812)
        report.print_report()
    """
    def __init__(self):
        self.measurements = []

    def __len__(self):
        return len(self.measurements)

    def add(self, label, elapsed_ms):
        if elapsed_ms < 0:
            raise ValueError(f"Elapsed time for '{label}' is negative: {elapsed_ms}.")
        self.measurements.append((label, int(elapsed_ms)))

    def lines(self):
        return [f"{label}: {ms} ms" for label, ms in self.measurements]

    def print_report(self, file=None):
        for line in self.lines():
            print(line, file=file or sys.stdout)
