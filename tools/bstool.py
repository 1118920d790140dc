#!/usr/bin/env python3
import argparse, csv, os
from bottlesort.engine.controller import initialize_level
from bottlesort.rng import PMRandom

def write_tsv(state, path):
    # one bottle per row, bottom layer first; empty bottles are empty rows
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        for b in state.bottles:
            w.writerow(b)

def cmd_emit(args):
    state = initialize_level(args.level, PMRandom.from_seed(args.seed))
    write_tsv(state, args.out)
    print(f"Wrote {args.out}")

def cmd_golden(args):
    base = os.path.join(args.outdir, str(args.seed))
    os.makedirs(base, exist_ok=True)
    for lvl in range(1, args.levels + 1):
        state = initialize_level(lvl, PMRandom.from_seed(args.seed))
        write_tsv(state, os.path.join(base, f"{lvl:02d}.tsv"))
    print(f"Wrote golden pack to {base}")

def main():
    p = argparse.ArgumentParser()
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--seed', type=int, required=True)
    p1.add_argument('--level', type=int, required=True)
    p1.add_argument('--out', type=str, required=True)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('golden')
    p2.add_argument('--seed', type=int, required=True)
    p2.add_argument('--levels', type=int, default=5)
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_golden)
    args = p.parse_args()
    args.func(args)

if __name__ == '__main__':
    main()
