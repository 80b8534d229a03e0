#!/usr/bin/env python3
# Example Invocations
# hutupy helpers

import argparse
import sys
import time

# Add src to path
sys.path.append('src')

from hutupy.dates import timestamps
from hutupy.dates.datetimes import format_current, reformat
from hutupy.fs.files import write_file, read_file, append_file, delete_file, read_dirs
from hutupy.utils.io import Settings
from hutupy.utils.logging import get_logger
from hutupy.utils.timers import Stopwatch, Timer

logger = get_logger("run_examples")

def date_examples(settings):
    """Timestamp and date-time helpers."""
    now_ts = timestamps.current_timestamp()
    print(f"Current timestamp: {now_ts}")
    print(f"Current timestamp plus 4 hours: {timestamps.add_seconds(now_ts, 4 * 60 * 60)}")
    print(f"Current timestamp format: {format_current(settings.datetime_format)}")

    reformatted = reformat("2023-04-01 12:00:00", "%F %T", "%F")
    assert reformatted == "2023-04-01", reformatted
    print(f"Reformatted date: {reformatted}")

def file_examples(work_dir):
    """Round trip a small file through the file helpers."""
    path = f"{work_dir}/hutupy_example_{timestamps.current_timestamp()}.txt"

    write_file(path, "hello")
    appended = append_file(path, ", world")
    print(f"Appended {appended} bytes, file now reads: {read_file(path)!r}")
    print(f"{len(read_dirs(work_dir))} entries in {work_dir}")
    delete_file(path)

def stopwatch_examples(pause):
    """Stopwatch that ignores time spent while stopped."""
    sw = Stopwatch.start_new()
    time.sleep(pause)
    sw.stop()
    time.sleep(pause)
    print(f"Stopwatch after one {pause}s interval and one {pause}s pause: {sw}")

    with Timer("sleep block") as timer:
        time.sleep(pause)
    print(f"Timer measured {timer.elapsed_ms:.1f} ms")

def main():
    parser = argparse.ArgumentParser(description="Run example invocations of the hutupy helpers")
    parser.add_argument("--config", default="configs/default.yaml",
                       help="Settings file")
    parser.add_argument("--work-dir", default="/tmp",
                       help="Directory for the temporary example file")
    parser.add_argument("--pause", type=float, default=0.1,
                       help="Seconds to sleep in the stopwatch example")

    args = parser.parse_args()

    try:
        settings = Settings.from_file(args.config)
        date_examples(settings)
        file_examples(args.work_dir)
        stopwatch_examples(args.pause)
        print("\n✅ Examples complete!")

    except Exception as e:
        logger.error(f"Examples failed: {e}")
        print(f"❌ Examples failed: {e}")
        return 1

    return 0

if __name__ == "__main__":
    exit(main())
