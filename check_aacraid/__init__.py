"""Nagios health check for Adaptec (aacraid) RAID controllers via arcconf."""

__version__ = '0.2.0'
