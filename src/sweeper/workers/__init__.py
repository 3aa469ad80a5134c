# Filename: __init__.py
# Author: Rich Lewis @RichLewis007
# Description: Worker components package. Exports the job queue, the directory scanner,
#              artifact removal and the worker pool that ties them together.

__all__ = ["delete_worker", "job_queue", "pool", "scan_worker"]
