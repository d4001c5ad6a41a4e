"""
Tests for the arcconf report parser.
"""
import logging
import unittest
from pathlib import Path

from .sections import split_sections
from .extractors import aggregate_errors, parse_controller, parse_logical, parse_physical
from ..core.errors import ParseError
from ..schema.models import ControllerInfo

TESTDATA = Path(__file__).resolve().parent.parent / 'testdata'
BANNER = '-' * 70


def read_sample(name):
    return (TESTDATA / name).read_text(encoding='utf-8')


def drive_block(number, state='Online', counters=None, hard_drive=True):
    """Build a minimal physical device block."""
    counters = counters if counters is not None else {
        'Hardware Error Count': 0,
        'Medium Error Count': 0,
        'Parity Error Count': 0,
        'Link Failure Count': 0,
        'Aborted Command Count': 0,
        'SMART Warning Count': 0,
    }
    lines = [f"      Device #{number}"]
    lines.append("         Device is a Hard drive" if hard_drive else "         Device is an Enclosure services device")
    lines.append(f"         State                              : {state}")
    lines.append(f"         Serial number                      : SN{number}")
    for label, value in counters.items():
        lines.append(f"         {label:<35}: {value}")
    return "\n".join(lines) + "\n"


class TestSplitSections(unittest.TestCase):
    """Test cases for split_sections."""

    def test_split_sample_report(self):
        """Test that a full report yields the three named sections."""
        sections = split_sections(read_sample('optimal.txt'))
        self.assertIn("Controller Status", sections.controller)
        self.assertNotIn("Logical Device number", sections.controller)
        self.assertIn("Logical Device number 0", sections.logical)
        self.assertIn("Device #0", sections.physical)

    def test_short_dash_lines_do_not_split(self):
        """Test that the 56-dash sub-headings stay inside their section."""
        sections = split_sections(read_sample('optimal.txt'))
        self.assertIn("Controller Version Information", sections.controller)
        self.assertIn("BIOS", sections.controller)

    def test_not_enough_sections(self):
        """Test that a report missing the physical section is rejected."""
        with self.assertRaises(ParseError) as ctx:
            split_sections(read_sample('truncated.txt'))
        self.assertIn("Not enough sections", str(ctx.exception))

    def test_garbage_input(self):
        """Test that text without banners is rejected."""
        with self.assertRaises(ParseError):
            split_sections("Invalid controller number.\n")

    def test_extra_sections_ignored(self):
        """Test that sections after the physical one are ignored."""
        text = "\n".join([
            "Controllers found: 1",
            BANNER, "Controller information", BANNER, "ctrl",
            BANNER, "Logical device information", BANNER, "ld",
            BANNER, "Physical Device information", BANNER, "pd",
            BANNER, "maxCache information", BANNER, "cache",
        ])
        sections = split_sections(text)
        self.assertEqual(sections.physical.strip(), "pd")


class TestParseController(unittest.TestCase):
    """Test cases for parse_controller."""

    def test_sample_controller(self):
        """Test extraction of every controller field from a real report."""
        controller = parse_controller(split_sections(read_sample('optimal.txt')).controller)
        self.assertEqual(controller.status, "Optimal")
        self.assertEqual(controller.mode, "RAID (Expose RAW)")
        self.assertEqual(controller.model, "Adaptec ASR8805")
        self.assertEqual(controller.serial, "7A4613B2A3F")
        self.assertEqual(controller.bios, "7.5-0 (32118)")
        self.assertEqual(controller.temp_c, 55)
        self.assertEqual(controller.temp_f, 131)
        self.assertEqual(controller.temp_str, "Normal")

    def test_abnormal_temperature(self):
        """Test that the qualitative temperature label is captured as reported."""
        controller = parse_controller(split_sections(read_sample('physical_errors.txt')).controller)
        self.assertEqual(controller.temp_c, 98)
        self.assertEqual(controller.temp_str, "Abnormal")

    def test_unparseable_temperature_uses_defaults(self):
        """Test the -1/unknown defaults when the temperature line is odd."""
        controller = parse_controller(
            "   Controller Status                        : Optimal\n"
            "   Temperature                              : Not Available\n"
        )
        self.assertEqual(controller.status, "Optimal")
        self.assertEqual(controller.temp_c, -1)
        self.assertEqual(controller.temp_f, -1)
        self.assertEqual(controller.temp_str, "unknown")

    def test_empty_section(self):
        """Test that an empty section gives an all-default record."""
        self.assertEqual(parse_controller(""), ControllerInfo())


class TestParseLogical(unittest.TestCase):
    """Test cases for parse_logical."""

    def test_sample_logical_devices(self):
        """Test that each logical device is parsed in report order."""
        volumes = parse_logical(split_sections(read_sample('optimal.txt')).logical)
        self.assertEqual([v.name for v in volumes], ["system", "data"])
        self.assertEqual([v.number for v in volumes], [0, 1])
        self.assertEqual(volumes[0].raid_level, "1")
        self.assertEqual(volumes[0].size, "228780 MB")
        self.assertEqual(volumes[0].device_type, "Data")
        self.assertEqual(volumes[1].raid_level, "5")
        self.assertEqual(volumes[1].size, "5721562 MB")
        self.assertEqual(volumes[1].status, "Optimal")

    def test_degraded_status(self):
        """Test that a degraded device keeps its raw status."""
        volumes = parse_logical(split_sections(read_sample('degraded_logical.txt')).logical)
        self.assertEqual(volumes[0].status, "Optimal")
        self.assertEqual(volumes[1].status, "Degraded")

    def test_no_logical_devices(self):
        """Test a controller without any logical devices."""
        self.assertEqual(parse_logical("\nNo logical devices configured\n\n"), [])

    def test_missing_fields_are_none(self):
        """Test that fields not in the block are left unset."""
        volumes = parse_logical("Logical Device number 3\n   RAID level : 10\n")
        self.assertEqual(len(volumes), 1)
        self.assertEqual(volumes[0].number, 3)
        self.assertIsNone(volumes[0].name)
        self.assertIsNone(volumes[0].status)
        self.assertEqual(volumes[0].label, "#3")


class TestParsePhysical(unittest.TestCase):
    """Test cases for parse_physical."""

    def test_sample_physical_devices(self):
        """Test that drives are parsed and the enclosure is skipped."""
        disks = parse_physical(split_sections(read_sample('optimal.txt')).physical)
        self.assertEqual(len(disks), 5)
        self.assertEqual([d.device for d in disks], [0, 1, 2, 3, 4])
        first = disks[0]
        self.assertEqual(first.state, "Online")
        self.assertEqual(first.vendor, "ATA")
        self.assertEqual(first.model, "WDC WD20EFRX-68E")
        self.assertEqual(first.is_ssd, "No")
        self.assertEqual(first.size, "1907729 MB")
        self.assertEqual(first.serial, "WD-WCC4E0A1B2C0")
        self.assertEqual(first.error_count, 0)

    def test_error_counts(self):
        """Test aggregate error counts, including the ignored aborted-command counter."""
        disks = parse_physical(split_sections(read_sample('physical_errors.txt')).physical)
        by_device = {d.device: d for d in disks}
        self.assertEqual(by_device[1].error_count, 12)
        self.assertEqual(by_device[2].is_ssd, "Yes")
        self.assertEqual(by_device[3].state, "Failed")
        # aborted commands only
        self.assertEqual(by_device[4].error_count, 0)

    def test_no_error_counters(self):
        """Test that old firmware output means no physical data, not zero disks."""
        with self.assertLogs('check_aacraid.parse.extractors', level='WARNING'):
            disks = parse_physical(split_sections(read_sample('no_error_counters.txt')).physical)
        self.assertIsNone(disks)

    def test_only_enclosures(self):
        """Test that a section with counters but no drives gives an empty list."""
        text = drive_block(0, hard_drive=False)
        self.assertEqual(parse_physical(text), [])

    def test_missing_counter(self):
        """Test that a drive with a missing counter has no aggregate."""
        counters = {
            'Hardware Error Count': 0,
            'Medium Error Count': 0,
            'Parity Error Count': 0,
            'Aborted Command Count': 0,
            'SMART Warning Count': 0,
        }
        disks = parse_physical(drive_block(0) + drive_block(1, counters=counters))
        self.assertEqual(disks[0].error_count, 0)
        self.assertIsNone(disks[1].error_count)

    def test_per_counter_breakdown_not_retained(self):
        """Test that only the aggregate is kept on the record."""
        disk = parse_physical(drive_block(0))[0]
        self.assertNotIn('hardware', disk.to_dict())
        self.assertIn('error_count', disk.to_dict())


class TestAggregateErrors(unittest.TestCase):
    """Test cases for aggregate_errors."""

    def test_sum_excludes_aborted(self):
        counters = {'hardware': 1, 'medium': 2, 'parity': 3, 'link_fail': 4,
                    'aborted': 100, 'smart_warnings': 5}
        self.assertEqual(aggregate_errors(counters), 15)

    def test_missing_aborted_counter(self):
        counters = {'hardware': 0, 'medium': 0, 'parity': 0, 'link_fail': 0,
                    'smart_warnings': 0}
        self.assertIsNone(aggregate_errors(counters))


if __name__ == '__main__':
    logging.basicConfig(level=logging.ERROR)
    unittest.main()
