"""Decode NMEA sentences from the command line.

Usage::

    python main.py '$GNRMC,041704.000,A,2935.21718,N,10631.58906,E,0.00,172.39,071124,,,A*7E'
    cat capture.nmea | python main.py --output decoded.txt

Each decoded message is printed; sentences failing their checksum are
reported on stderr.
"""

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from gnssdecode import DecodeWorker, dump_location_info, save_location_info

logger = logging.getLogger("main")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Decode NMEA 0183 sentences.")
    parser.add_argument(
        "sentences",
        nargs="*",
        help="sentences to decode (default: read one per line from stdin)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="append each decoded message to this file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="log why sentences or fields were rejected",
    )
    return parser.parse_args(argv)


def _read_sentences(args: argparse.Namespace) -> Iterable[str]:
    if args.sentences:
        return args.sentences
    return (line for line in sys.stdin if line.strip())


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    rejected = 0
    with DecodeWorker() as worker:
        futures = [worker.submit(sentence) for sentence in _read_sentences(args)]
        for future in futures:
            data = future.result()
            if data is None:
                rejected += 1
                continue
            dump_location_info(data)
            print()
            if args.output is not None:
                save_location_info(data, args.output)

    if rejected:
        logger.warning("%d sentence(s) failed checksum validation", rejected)
    return 1 if rejected and rejected == len(futures) else 0


if __name__ == "__main__":
    sys.exit(main())
