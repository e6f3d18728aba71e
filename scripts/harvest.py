"""Search the judicial site from the command line and optionally download judgments.

Usage:
    python scripts/harvest.py year=2024 case_type=12 --json results.json
    python scripts/harvest.py year=2024 --download data/judgments

Each downloaded file carries the provenance footer and is named like the
browser download (Digital_BLD_Judgment_<title>_<ms>.pdf). A failed document is
logged and skipped; the remaining records are still processed.
"""

import argparse
import json
import logging
import os
import sys

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger("harvest")

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from judgment_search.errors import MalformedDocument, NetworkError  # noqa: E402
from judgment_search.documents.session import open_document  # noqa: E402
from judgment_search.relay import UpstreamRelay  # noqa: E402
from judgment_search.scraper.extraction import SearchStatus, extract  # noqa: E402


def parse_params(pairs):
    params = {}
    for pair in pairs:
        if '=' not in pair:
            raise argparse.ArgumentTypeError(f"expected key=value, got {pair!r}")
        key, value = pair.split('=', 1)
        params[key] = value
    return params


def download_all(records, relay, out_dir):
    os.makedirs(out_dir, exist_ok=True)
    saved = 0
    for idx, record in enumerate(records, start=1):
        logger.info(f"[harvest] {idx}/{len(records)} {record.title}")
        try:
            session = open_document(record, relay)
        except MalformedDocument as e:
            logger.warning(f"[harvest] skip {record.document_url}: {e.user_message}")
            continue
        except NetworkError as e:
            logger.warning(f"[harvest] skip {record.document_url}: {e}")
            continue
        with session:
            data, filename, _ = session.download_payload()
            with open(os.path.join(out_dir, filename), 'wb') as f:
                f.write(data)
        saved += 1
    return saved


def main(argv=None):
    ap = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument('params', nargs='*', help='search form fields as key=value')
    ap.add_argument('--json', dest='json_out', help='write extracted records to this JSON file')
    ap.add_argument('--download', dest='download_dir', help='download stamped PDFs into this directory')
    args = ap.parse_args(argv)

    relay = UpstreamRelay()
    try:
        markup = relay.search(parse_params(args.params))
    except NetworkError as e:
        logger.error(f"[harvest] search failed: {e}")
        return 1

    result = extract(markup)
    if result.status is not SearchStatus.OK:
        logger.info(f"[harvest] {result.message}")
        return 0

    rows = [r.model_dump() for r in result]
    if args.json_out:
        with open(args.json_out, 'w', encoding='utf-8') as f:
            json.dump(rows, f, ensure_ascii=False, indent=2)
        logger.info(f"[harvest] wrote {len(rows)} records to {args.json_out}")
    else:
        for r in rows:
            print(f"{r['title']} | {r['parties']} | {r['uploaded_on']} | {r['from_court']} | {r['document_url']}")

    if args.download_dir:
        saved = download_all(result.records, relay, args.download_dir)
        logger.info(f"[harvest] saved {saved}/{len(result)} documents to {args.download_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
