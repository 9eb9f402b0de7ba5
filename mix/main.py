#!/usr/bin/env python3
"""mix: compose objects from method tables."""

import argparse
import json
import logging
import os
import sys

from mix import objects
from mix.clash import compose_with_clashes
from mix.compose import compose_list, compose_two
from mix.delegate import compose_by_delegation
from mix.dispatch import END_OF_CHAIN, MethodNotFound, call_next, dispatch, dispatch_all, dispatch_at
from mix.trace import traced
from mixkit.catalog import build
from mixkit.counter import make_counter
from mixkit.employer import make_employer
from mixkit.person import make_person

log = logging.getLogger(__name__)

COMPOSERS = {
    "override": compose_list,
    "clash": compose_with_clashes,
    "delegate": compose_by_delegation,
}


def _compose(args) -> objects.Object:
    parts = [build(name) for name in args.kits]
    log.debug(f"composing {len(parts)} object(s) with mode {args.mode}")
    obj = COMPOSERS[args.mode](parts)
    if args.trace:
        logging.getLogger("mix.trace").setLevel(logging.INFO)
        obj = traced(obj, level=logging.INFO)
    return obj


def _parse_arg(text: str):
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def _show(value) -> str:
    if value is END_OF_CHAIN:
        return "<end of chain>"
    return json.dumps(value)


def cmd_methods(args):
    obj = _compose(args)
    for name in sorted(objects.method_names(obj)):
        entry = obj.table[name]
        if isinstance(entry, objects.Chain):
            print(f"{name} (chain of {len(entry)})")
        else:
            print(name)


def cmd_call(args):
    obj = _compose(args)
    call_args = [_parse_arg(a) for a in args.args]
    if args.all:
        for result in dispatch_all(obj, args.method, call_args):
            print(_show(result))
    elif args.index is not None:
        print(_show(dispatch_at(obj, args.method, call_args, args.index)))
    else:
        print(_show(dispatch(obj, args.method, call_args)))


def cmd_attrs(args):
    obj = _compose(args)
    json.dump(objects.attributes(obj), sys.stdout, indent=2, sort_keys=True)
    print()


def cmd_demo(args):
    counter = make_counter()
    person = make_person("alice", 30)
    employer = make_employer("Initech", 50000)

    print("== override")
    both = compose_two(person, employer)
    print(f"describe: {dispatch(both, 'describe')}")
    print(f"get_company: {dispatch(both, 'get_company')}")

    print("== mutation sharing")
    with_counter = compose_two(person, counter)
    dispatch(with_counter, "increment")
    dispatch(with_counter, "increment")
    print(f"counter after two increments via composite: {dispatch(counter, 'get_count')}")

    print("== clash chain")
    o1 = objects.create({"getAttribute1": lambda: 500})
    o2 = objects.create({"getAttribute1": lambda: 600, "getAttribute2": lambda: 700})
    clashed = compose_with_clashes([o1, o2])
    print(f"getAttribute1: {dispatch(clashed, 'getAttribute1')}")
    print(f"getAttribute1 #2: {dispatch_at(clashed, 'getAttribute1', [], 2)}")
    print(f"getAttribute1 #3: {_show(dispatch_at(clashed, 'getAttribute1', [], 3))}")
    print(f"next after #1: {call_next(clashed, 'getAttribute1', [], 1)}")
    print(f"getAttribute2: {dispatch(clashed, 'getAttribute2')}")

    print("== delegation")
    delegated = compose_by_delegation([o1, o2])
    print(f"getAttribute1: {dispatch(delegated, 'getAttribute1', [1, 2])}")
    print(f"getAttribute2: {dispatch(delegated, 'getAttribute2')}")


def main(argv=None):
    parser = argparse.ArgumentParser(prog="mix", description="Compose objects from method tables")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("MIX_LOG_LEVEL", "WARNING"),
        help="Logging level (default: $MIX_LOG_LEVEL or WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    def add_compose_args(p):
        p.add_argument("kits", nargs="+", help="Demo objects to compose, highest precedence first")
        p.add_argument("--mode", choices=sorted(COMPOSERS), default="override")
        p.add_argument("--trace", action="store_true", help="Log every method call")

    # demo
    p = sub.add_parser("demo", help="Run the composition walkthrough")
    p.set_defaults(func=cmd_demo)

    # methods
    p = sub.add_parser("methods", help="List the methods of a composed object")
    add_compose_args(p)
    p.set_defaults(func=cmd_methods)

    # call
    p = sub.add_parser("call", help="Dispatch a method on a composed object")
    add_compose_args(p)
    p.add_argument("--method", required=True)
    which = p.add_mutually_exclusive_group()
    which.add_argument("--index", type=int, help="1-based chain index")
    which.add_argument("--all", action="store_true", help="Call every implementation in the chain")
    p.add_argument("--arg", dest="args", action="append", default=[],
                   help="Argument as a JSON literal (repeatable)")
    p.set_defaults(func=cmd_call)

    # attrs
    p = sub.add_parser("attrs", help="Show the attributes of a composed object")
    add_compose_args(p)
    p.set_defaults(func=cmd_attrs)

    args = parser.parse_args(argv)
    level = args.log_level.upper()
    if not isinstance(logging.getLevelName(level), int):
        parser.error(f"unknown log level: {args.log_level!r}")
    logging.basicConfig(level=level, format="%(levelname)s:%(name)s:%(message)s")
    if not args.command:
        parser.print_help()
        return 1
    try:
        args.func(args)
    except (MethodNotFound, TypeError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
