"""Entry point for the check_aacraid Nagios plugin."""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import Settings
from .core.config import ProbeConfig
from .core.errors import ProbeError
from .core.logging_config import LoggingConfigurator
from .core.probe import HealthProbe
from .core.reporter import abort, dump_disks, report_and_exit
from .core.severity import Severity

logger = logging.getLogger(__name__)


class PluginArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits UNKNOWN on usage errors, as Nagios expects."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(int(Severity.UNKNOWN), f"{self.prog}: error: {message}\n")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""

    parser = PluginArgumentParser(
        prog='check_aacraid',
        description='Nagios plugin to check the status of Adaptec RAID controllers via arcconf',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Controller and logical devices
  check_aacraid

  # Include physical disk error counters, dump failing disks to stderr
  check_aacraid --physical --verbose

  # Replay previously saved "arcconf GETCONFIG 1" output
  check_aacraid --physical --dry ./arcconf-output.txt

Exit codes: 0 OK, 1 WARNING, 2 CRITICAL, 3 UNKNOWN

For sudo access put the following in your sudo config:
  nagios ALL=(root) NOPASSWD: /usr/Arcconf/arcconf GETCONFIG 1 *
        """
    )

    parser.add_argument('--physical', action='store_true',
                        help='Include physical disk checks')
    parser.add_argument('--verbose', action='store_true',
                        help='Dump the parsed record of each unhealthy physical disk to stderr')
    parser.add_argument('--dry', type=str, default=None, metavar='PATH',
                        help='Read arcconf output from a file instead of running arcconf')
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {__version__}')

    arcconf_group = parser.add_argument_group('arcconf Configuration')
    arcconf_group.add_argument('--config', type=str, default=None, metavar='FILE',
                               help='YAML or JSON settings file')
    arcconf_group.add_argument('--arcconf', type=str, default=None, metavar='PATH',
                               help='Path to the arcconf executable (default: /usr/Arcconf/arcconf)')
    arcconf_group.add_argument('--controller', type=int, default=None,
                               help='Controller number passed to GETCONFIG (default: 1)')
    arcconf_group.add_argument('--timeout', type=int, default=None,
                               help='Seconds to wait for arcconf (default: no limit)')
    arcconf_group.add_argument('--no-sudo', dest='no_sudo', action='store_true',
                               help='Never prefix arcconf with sudo')

    debug_group = parser.add_argument_group('Debugging')
    debug_group.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                             default='WARNING', help='Set logging level (default: WARNING)')
    debug_group.add_argument('--logfile', type=str, default=None,
                             help='Path to log file (default: stderr only)')

    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point. Always ends with sys.exit()."""

    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        config = ProbeConfig.from_args(args, Settings(config_file=args.config))
    except ValueError as e:
        parser.error(str(e))

    LoggingConfigurator.setup_logging(
        log_level=config.log_level,
        log_file=config.logfile
    )
    logger.debug(f"Probe configuration: {config}")

    try:
        result = HealthProbe(config).run()
    except ProbeError as e:
        logger.debug(f"Probe aborted: {e.__class__.__name__}: {e}")
        abort(e)

    if config.verbose and result.unhealthy_disks:
        dump_disks(result.unhealthy_disks)

    report_and_exit(result.messages, result.severity)


if __name__ == '__main__':
    main()
