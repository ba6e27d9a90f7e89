from coveralls_jacoco.model import CoverageReport
from coveralls_jacoco.report.parse import package_path, parse_report, read_coverage, strip_root_package
from coveralls_jacoco.report.xml_reader import read_root

__all__ = [
    "CoverageReport",
    "package_path",
    "parse_report",
    "read_coverage",
    "read_root",
    "strip_root_package",
]
