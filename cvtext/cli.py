# cvtext/cli.py
import argparse
import json
import sys
from pathlib import Path

from .config import settings
from .evaluation import evaluate_pair
from .extractor import CVTextExtractor
from .utils import iter_files


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cvtext", description="Reconstruct plain text from CV files.")
    parser.add_argument("--mode", choices=["extract", "evaluate", "batch_extract"], required=True)
    parser.add_argument("--input", required=True, help="file path or directory")
    parser.add_argument("--gt", help="ground truth .txt file (for evaluate mode)")
    parser.add_argument("--out", help="output file to save extracted text (json lines)")
    parser.add_argument("--min-chars", type=int, default=settings.MIN_EXTRACTED_CHARS,
                        help="minimum characters for a usable extraction")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    extractor = CVTextExtractor()

    if args.mode == "extract":
        res = extractor.extract(args.input)
        print(res.text)
        if not res.is_usable(args.min_chars):
            print(f"Could not extract sufficient text ({res.char_count} characters). "
                  "Please paste the text directly.", file=sys.stderr)
            return 1
    elif args.mode == "batch_extract":
        out_path = args.out or "extracted.jsonl"
        with open(out_path, "w", encoding="utf8") as fo:
            for f in iter_files(args.input):
                r = extractor.extract(f)
                fo.write(r.to_jsonl() + "\n")
                print("OK" if r.is_usable(args.min_chars) else "SHORT", f)
    elif args.mode == "evaluate":
        if not args.gt:
            raise SystemExit("Provide --gt ground truth file")
        r = extractor.extract(args.input)
        gt = Path(args.gt).read_text(encoding="utf8")
        metrics = evaluate_pair(gt, r.text)
        print(json.dumps(metrics, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
