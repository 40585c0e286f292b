"""Query CPU, memory, disks, network, sensors and processes from the command line."""

__version__ = "0.1.0"
