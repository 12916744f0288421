"""Operating-systems lab exercises: system calls, IPC, threads, synchronisation, scheduling and deadlock."""

__version__ = "0.1.0"