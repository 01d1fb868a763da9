#!/usr/bin/env python3
"""
icvm - Intcode VM command-line driver

Usage:
    python icvm.py run <program> [--input 1,2] [--max-steps N] [--trace]
    python icvm.py disasm <program> [--show-memory]
    python icvm.py search <program> [--target 19690720]

<program> is a bundled name (day2, day5, day9), a file holding
comma-separated Intcode, or the comma-separated text itself.

Examples:
    python icvm.py run day9 --input 1
    python icvm.py run "1,0,0,0,99"
    python icvm.py disasm day5 --show-memory
    python icvm.py search day2
"""

import argparse
import logging
import sys
import os
from pathlib import Path

# Allow running from project root without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from intcode_vm import __version__
from intcode_vm.emu import IntcodeMachine, StopReason, load_program, parse_program
from intcode_vm.disassembler import disassemble
from intcode_vm.errors import IntcodeError
from intcode_vm.programs import PROGRAMS
from intcode_vm.search import DEFAULT_TARGET, find_noun_verb, search_answer

logger = logging.getLogger("icvm")


def resolve_program(source: str) -> list:
    """Bundled program name, file path, or literal text → memory image."""
    if source in PROGRAMS:
        return list(PROGRAMS[source])
    return load_program(source)


def setup_logging(args):
    """Configure logging from -v / -q / --log-file."""
    if args.quiet:
        level = logging.ERROR
    elif args.verbose == 0:
        level = logging.WARNING
    elif args.verbose == 1:
        level = logging.INFO
    else:  # -vv or more
        level = logging.DEBUG

    handlers = []

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    handlers.append(console)

    if args.log_file:
        log_path = Path(args.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        handlers.append(file_handler)
        level = logging.DEBUG

    logging.basicConfig(level=level, handlers=handlers, force=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="icvm",
        description="Intcode virtual machine",
        epilog="Bundled programs: " + ", ".join(PROGRAMS.keys()),
    )
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="Increase verbosity (-v, -vv)")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Suppress all logging except errors")
    parser.add_argument("--log-file", type=str,
                        help="Write a debug log to file")
    parser.add_argument("--version", action="version",
                        version=f"icvm {__version__}")

    sub = parser.add_subparsers(dest="command", required=True)

    p_run = sub.add_parser("run", help="Run a program to halt")
    p_run.add_argument("program", help="Bundled name, file, or comma-separated text")
    p_run.add_argument("--input", "-i", default="",
                       help="Comma-separated input values (e.g. 1 or 5,7)")
    p_run.add_argument("--max-steps", type=int, default=None,
                       help="Stop after N instructions (debug)")
    p_run.add_argument("--trace", action="store_true",
                       help="Print an instruction trace after the run")

    p_dis = sub.add_parser("disasm", help="Linear disassembly listing")
    p_dis.add_argument("program", help="Bundled name, file, or comma-separated text")
    p_dis.add_argument("--show-memory", action="store_true",
                       help="Suffix read parameters with their current values")

    p_search = sub.add_parser("search", help="Find the noun/verb pair for a target")
    p_search.add_argument("program", help="Bundled name, file, or comma-separated text")
    p_search.add_argument("--target", type=int, default=DEFAULT_TARGET,
                          help=f"Result to look for (default: {DEFAULT_TARGET})")
    return parser


def cmd_run(args) -> int:
    program = resolve_program(args.program)
    inputs = parse_program(args.input)
    vm = IntcodeMachine(program, inputs,
                        on_output=lambda value: print(f"Output: {value}"))
    vm.enable_trace(args.trace)
    try:
        reason = vm.run(max_steps=args.max_steps)
    finally:
        if args.trace:
            print(vm.get_trace(), file=sys.stderr)
    if reason is not StopReason.HALT:
        print(f"Stopped: {reason.value} ({vm.regs.display()})", file=sys.stderr)
        return 1
    print(f"Result: {vm.return_value}")
    return 0


def cmd_disasm(args) -> int:
    for line in disassemble(resolve_program(args.program),
                            show_memory=args.show_memory):
        print(line)
    return 0


def cmd_search(args) -> int:
    pair = find_noun_verb(resolve_program(args.program), args.target)
    if pair is None:
        print(f"No noun/verb pair produces {args.target}", file=sys.stderr)
        return 1
    noun, verb = pair
    print(f"noun={noun} verb={verb} answer={search_answer(noun, verb)}")
    return 0


COMMANDS = {
    "run": cmd_run,
    "disasm": cmd_disasm,
    "search": cmd_search,
}


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args)

    try:
        return COMMANDS[args.command](args)
    except IntcodeError as e:
        print(f"Machine fault: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Program error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error reading {args.program}: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Internal error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 2


if __name__ == "__main__":
    sys.exit(main())
