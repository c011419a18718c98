from __future__ import annotations
import argparse, json
from anagrams import Engine
from anagrams import config as CFG

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Sentence anagram CLI (Engine-backed)")
    g = p.add_mutually_exclusive_group(required=True)
    g.add_argument("--build", action="store_true", help="Build index from --roots")
    g.add_argument("--load", action="store_true", help="Load a pickled index from --cache")

    p.add_argument("--roots", nargs="+", default=[], help="Dictionary files or folders of .txt word lists")
    p.add_argument("--cache", default=None, help="Pickle path for the index")
    p.add_argument("--q", default=None, help="Single sentence to run once")
    p.add_argument("--word", action="store_true", help="Treat queries as single words (word anagrams)")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--workers", type=int, default=CFG.SEARCH_WORKERS, help="Parallel search workers (0 = sequential)")
    p.add_argument("--mode", choices=["threads", "procs"], default=CFG.PARALLEL_MODE)
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    eng = Engine()
    try:
        if args.build:
            if not args.roots:
                p.error("--build requires --roots")
            eng.build(roots=args.roots, cache=args.cache, verbose=args.verbose)
        else:
            eng.load(cache=args.cache, verbose=args.verbose)

        def run_query(q: str):
            if args.word:
                rows = [(w,) for w in eng.word_anagrams(q)]
            else:
                rows = eng.sentence_anagrams(q, workers=args.workers, mode=args.mode)
            if args.json:
                print(json.dumps([list(r) for r in rows], ensure_ascii=False, indent=2))
                return
            if not rows:
                print("(no anagrams)"); return
            for r in rows:
                print(" ".join(r))
            print(f"-- {len(rows)} anagram(s)")

        if args.q is not None:
            run_query(args.q)

        if args.repl:
            print("Type a sentence (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
