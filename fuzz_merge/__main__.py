from __future__ import annotations

import logging

from fuzz_merge.app_factory import create_app
from fuzz_merge.config.ini_config import IniConfig
from fuzz_merge.domain.errors import ConfigError, WorkingCopyError
from fuzz_merge.log_setup import setup_logging

logger = logging.getLogger("fuzz_merge")


def main() -> int:
    try:
        settings = IniConfig.from_env_or_default().load_settings()
    except (ConfigError, FileNotFoundError) as e:
        setup_logging()
        logger.error("Invalid configuration: %s", e)
        return 1

    setup_logging(settings.log_level)
    logger.info("Working directory: %s", settings.work_dir)

    service = create_app(settings)
    try:
        result = service.run()
    except WorkingCopyError as e:
        logger.error("%s", e)
        return 1

    logger.info(
        "Done! %d/%d branches processed, %d teams, %d traces.",
        result.branches_processed,
        result.branches_seen,
        len(result.teams),
        result.trace_count,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
