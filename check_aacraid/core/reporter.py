"""Plugin output: one summary line on stdout, state as exit code."""

import sys
from pprint import pformat
from typing import Iterable, List, NoReturn, TextIO

from .errors import ProbeError
from .severity import Severity
from ..schema.models import PhysicalDisk

MESSAGE_SEPARATOR = '  '


def format_summary(messages: Iterable[str]) -> str:
    return MESSAGE_SEPARATOR.join(messages)


def dump_disks(disks: List[PhysicalDisk], stream: TextIO = None) -> None:
    """Pretty-print disk records for diagnosis (--verbose)."""
    stream = stream or sys.stderr
    for disk in disks:
        print(pformat(disk.to_dict()), file=stream)


def report_and_exit(messages: Iterable[str], severity: Severity, stream: TextIO = None) -> NoReturn:
    stream = stream or sys.stdout
    print(format_summary(messages), file=stream)
    sys.exit(int(severity))


def abort(error: ProbeError, stream: TextIO = None) -> NoReturn:
    """Print an abort diagnostic and exit with the error's state."""
    report_and_exit([str(error)], error.severity, stream)
