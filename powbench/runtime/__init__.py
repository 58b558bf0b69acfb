# powbench/runtime/__init__.py

from .pool import default_workers, partition, WorkerPool
