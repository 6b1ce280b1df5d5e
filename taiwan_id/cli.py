
from __future__ import annotations
import argparse, sys, json
from .errors import InvalidPrefix
from .runner import run_validation, run_generation

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="taiwan-id", description="Validate or generate Taiwan National ID numbers")
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", type=str, help="Path to config JSON/YAML", default=None)
    common.add_argument("--out", type=str, help="Write the full result as JSON to this path", default=None)
    common.add_argument("--show-logs", action="store_true", help="Print trace logs to stderr")
    sub = p.add_subparsers(dest="command", required=True)

    v = sub.add_parser("validate", parents=[common], help="Check one or more IDs")
    v.add_argument("ids", nargs="*", help="IDs to check")
    v.add_argument("--file", type=str, help="TXT file with one ID per line")

    g = sub.add_parser("generate", parents=[common], help="Generate random valid IDs")
    g.add_argument("--prefix", type=str, default="", help="Letter, or letter + gender digit (e.g. A, A2)")
    g.add_argument("--count", type=int, default=1)
    g.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    return p

def _read_ids(path: str):
    with open(path, "r", encoding="utf-8") as f:
        return [line.rstrip("\r\n") for line in f if line.strip()]

def _cmd_validate(args) -> int:
    ids = list(args.ids)
    if args.file:
        ids.extend(_read_ids(args.file))
    if not ids:
        print("Must provide IDs or --file", file=sys.stderr)
        return 2
    result = run_validation(ids, args.config)
    for r in result["results"]:
        if r["valid"]:
            print(f"{r['id']} -> VALID")
        else:
            print(f"{r['id']} -> INVALID ({r['reason']})")
    _finish(args, result)
    return 0 if result["summary"]["invalid"] == 0 else 1

def _cmd_generate(args) -> int:
    if args.count < 0:
        print("--count must be >= 0", file=sys.stderr)
        return 2
    try:
        result = run_generation(args.prefix, args.count, args.config, seed=args.seed)
    except InvalidPrefix as e:
        print(str(e), file=sys.stderr)
        return 2
    for id_no in result["ids"]:
        print(id_no)
    _finish(args, result)
    return 0

def _finish(args, result) -> None:
    if args.show_logs:
        for line in result["logs"]:
            print(line, file=sys.stderr)
    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            json.dump(result, f, ensure_ascii=False, indent=2)
        print(f"Wrote {args.out}", file=sys.stderr)

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "validate":
        return _cmd_validate(args)
    return _cmd_generate(args)

if __name__ == "__main__":
    sys.exit(main())
