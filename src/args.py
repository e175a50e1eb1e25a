"""Argument parsing functionality for AuditGate."""

import argparse
from constants import Constants, ThresholdMode


def parse_args(argv=None):
    """Parses the arguments passed to the program.

    Every scan option defaults to None so that unset flags fall through to
    Action inputs, the config file, then built-in defaults.
    """
    parser = argparse.ArgumentParser(
        prog="auditgate",
        description=(
            "AuditGate - fail CI when packages exceed an AgentAudit risk threshold"
        ),
        add_help=True,
    )

    parser.add_argument("-p", "--packages",
                        dest="PACKAGES",
                        help="Comma-separated package identifiers; may be repeated",
                        action="append",
                        type=str)
    parser.add_argument("--scan-config",
                        dest="SCAN_CONFIG",
                        help="Auto-detect packages from package.json and requirements.txt",
                        action="store_const",
                        const="true")
    parser.add_argument("--fail-on",
                        dest="FAIL_ON",
                        help=(
                            "Risk threshold: unsafe, caution or any "
                            f"(default: {Constants.DEFAULT_FAIL_ON})"
                        ),
                        action="store",
                        type=str.lower,
                        choices=[m.value for m in ThresholdMode])
    parser.add_argument("--api-url",
                        dest="API_URL",
                        help=f"Trust registry base URL (default: {Constants.DEFAULT_API_URL})",
                        action="store",
                        type=str)
    parser.add_argument("-d", "--directory",
                        dest="WORKSPACE",
                        help="Root directory for manifest auto-detection",
                        action="store",
                        type=str)

    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to write the JSON results",
                        action="store",
                        type=str)
    parser.add_argument("--summary-file",
                        dest="SUMMARY_FILE",
                        help="Append the markdown report to this file",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)

    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
