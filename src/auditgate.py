"""AuditGate - CI gate on AgentAudit trust-registry ratings.

Collects package identifiers, looks each one up in a single registry fetch,
reports the ratings and fails the run when any package exceeds the configured
threshold.

    Returns:
        int: Exit code
"""
import logging
import sys

from args import parse_args
from analysis.matcher import resolve_all
from collector import collect_identifiers
from common.errors import AuditGateError, ConfigError
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from config import ScanConfig
from constants import Constants, ExitCodes
from models import RunOutcome
from registry.skills import fetch_skills
from report import export_json, render_summary, set_outputs, write_summary

logger = logging.getLogger(__name__)


def run_scan(config: ScanConfig) -> RunOutcome:
    """Run one scan pass and publish its report and outputs.

    Raises:
        RegistryError: The registry could not be queried; nothing is published.
    """
    identifiers = collect_identifiers(config)
    if is_debug_enabled(logger):
        logger.debug(
            "Collected identifiers",
            extra=extra_context(
                event="decision",
                component="cli",
                action="collect_identifiers",
                outcome="empty" if not identifiers else "non_empty",
                count=len(identifiers),
            ),
        )

    if not identifiers:
        logger.warning(
            "No packages to scan. Provide `packages` input or enable `scan-config`."
        )
        outcome = RunOutcome.empty()
        set_outputs(outcome, config.outputs_path)
        return outcome

    logger.info(
        "Scanning %d packages against %s...", len(identifiers), Constants.REGISTRY_NAME
    )
    entries = fetch_skills(config.api_url)
    outcome = resolve_all(identifiers, entries, config.fail_on, config.api_url)

    write_summary(render_summary(outcome, config.fail_on), config.summary_path)
    set_outputs(outcome, config.outputs_path)
    if config.output_file:
        export_json(outcome, config.output_file)
    return outcome


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)

    try:
        configure_logging(args.LOG_LEVEL, args.LOG_FILE)
        config = ScanConfig.from_args(args)
        outcome = run_scan(config)
    except (ConfigError, OSError) as e:
        logger.error("%s scan failed: %s", Constants.REGISTRY_NAME, e)
        sys.exit(ExitCodes.CONFIG_ERROR.value)
    except AuditGateError as e:
        logger.error("%s scan failed: %s", Constants.REGISTRY_NAME, e)
        sys.exit(ExitCodes.CONNECTION_ERROR.value)

    if outcome.has_issues:
        logger.error(
            '%s: packages exceed "%s" risk threshold',
            Constants.REGISTRY_NAME,
            config.fail_on.value,
        )
        sys.exit(ExitCodes.THRESHOLD_EXCEEDED.value)

    if outcome.results:
        logger.info("✅ All packages passed %s security scan", Constants.REGISTRY_NAME)
    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
