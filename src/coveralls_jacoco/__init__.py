from coveralls_jacoco._meta import __version__, logger
from coveralls_jacoco.model import SourceReport
from coveralls_jacoco.report import CoverageReport, parse_report
from coveralls_jacoco.sources import reconcile

__all__ = ["CoverageReport", "SourceReport", "__version__", "logger", "parse_report", "reconcile"]
