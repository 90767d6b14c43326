"""
Keyhole Timesheet — Entry Point.

`python main.py [yyyy-mm-dd]` prints the timesheet for the pay period
containing the given date (today by default).
"""

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from keyhole_timesheet.adapters.env_identity import EnvIdentityProvider
from keyhole_timesheet.adapters.sherpa_time_tracking import SherpaTimeTrackingAdapter
from keyhole_timesheet.config import load_settings
from keyhole_timesheet.core.calendar_dates import MalformedDateError
from keyhole_timesheet.core.report import render_timesheet
from keyhole_timesheet.core.timesheet_service import TimesheetService
from keyhole_timesheet.ports.identity_port import UnauthenticatedError
from keyhole_timesheet.ports.time_tracking_port import TimeTrackingError, UpstreamTimeout

logger = logging.getLogger(__name__)


async def run(reference_date: str | None) -> str:
    settings = load_settings()
    logging.getLogger().setLevel(settings.LOG_LEVEL)

    identity = await EnvIdentityProvider(settings).current_identity()
    service = TimesheetService(SherpaTimeTrackingAdapter(settings), settings)
    view = await service.build_timesheet(identity, reference_date)
    return render_timesheet(view)


def main() -> int:
    parser = argparse.ArgumentParser(description="Print a Keyhole pay-period timesheet.")
    parser.add_argument("date", nargs="?", help="reference date, yyyy-mm-dd (default: today)")
    args = parser.parse_args()

    try:
        print(asyncio.run(run(args.date)))
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "settings"
        print(f"ERROR: invalid configuration for {field}: {first['msg']}", file=sys.stderr)
        return 2
    except MalformedDateError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2
    except UnauthenticatedError:
        print("ERROR: sign in first: set SHERPA_TOKEN and SHERPA_USER_ID in .env", file=sys.stderr)
        return 1
    except UpstreamTimeout:
        print("ERROR: Sherpa did not answer in time, try again.", file=sys.stderr)
        return 1
    except TimeTrackingError as exc:
        logger.error("Timesheet build failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    sys.exit(main())
