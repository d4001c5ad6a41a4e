"""
Centralized arcconf GETCONFIG report grammar for check_aacraid

This module contains the definitive patterns used to scrape the arcconf
report. Every field the extractors fill in is listed here, so a change in
arcconf output format only needs to touch this table.
"""

import re

# Major section banner: 70 dashes, a heading line, 70 dashes
SECTION_BANNER = re.compile(r'-{70}\n.+?-{70}', re.DOTALL)

# Sections expected after splitting (index 0 is the text before the first banner)
SECTION_NAMES = ('preamble', 'controller', 'logical', 'physical')

# Per-entity banners inside the logical and physical sections
LOGICAL_DEVICE_BANNER = re.compile(r'Logical Device number (\d+)')
PHYSICAL_DEVICE_BANNER = re.compile(r'Device #(\d+)')

# Only present when the firmware reports per-disk error statistics
ERROR_COUNT_MARKER = re.compile(r'Hardware Error Count')

# Physical device fragments that are actual drives (not enclosures etc.)
HARD_DRIVE_MARKER = re.compile(r'Device is a Hard drive')

# Controller information section
CONTROLLER_FIELDS = {
    'bios': re.compile(r'BIOS\s+: (.+)'),
    'mode': re.compile(r'Controller Mode\s+: (.+)'),
    'model': re.compile(r'Controller Model\s+: (.+)'),
    'serial': re.compile(r'Controller Serial Number\s+: (.+)'),
    'status': re.compile(r'Controller Status\s+: (.+)'),
}

# e.g. "Temperature : 55 C/ 131 F (Normal)"
CONTROLLER_TEMPERATURE = re.compile(r'Temperature\s+: (\d+) C/ (\d+) F \((.+)\)')

# Logical device section, one match per logical device fragment
LOGICAL_FIELDS = {
    'name': re.compile(r'Logical Device name\s+: (.+)'),
    'raid_level': re.compile(r'RAID level\s+: (.+)'),
    'size': re.compile(r'Size\s+: (.+)'),
    'device_type': re.compile(r'Device Type\s+: (.+)'),
    'status': re.compile(r'Status of Logical Device\s+: (.+)'),
}

# Physical device section, one match per hard drive fragment
PHYSICAL_FIELDS = {
    'state': re.compile(r'State\s+: (.+)'),
    'vendor': re.compile(r'Vendor\s+: (.+)'),
    'model': re.compile(r'Model\s+: (.+)'),
    'is_ssd': re.compile(r'SSD\s+: (.+)'),
    'size': re.compile(r'Total Size\s+: (.+)'),
    'serial': re.compile(r'Serial number\s+: (.+)'),
}

ERROR_COUNTERS = {
    'hardware': re.compile(r'Hardware Error Count\s+: (\d+)'),
    'medium': re.compile(r'Medium Error Count\s+: (\d+)'),
    'parity': re.compile(r'Parity Error Count\s+: (\d+)'),
    'link_fail': re.compile(r'Link Failure Count\s+: (\d+)'),
    'aborted': re.compile(r'Aborted Command Count\s+: (\d+)'),
    'smart_warnings': re.compile(r'SMART Warning Count\s+: (\d+)'),
}

# Counters that make up a disk's aggregate error count. 'aborted' is
# collected but left out: it raises false positives on healthy drives.
SUMMED_ERROR_COUNTERS = ('hardware', 'medium', 'parity', 'link_fail', 'smart_warnings')
