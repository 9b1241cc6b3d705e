from stresscheck.io.report import format_report, report_filename, write_report

__all__ = [
    "format_report",
    "write_report",
    "report_filename",
]
