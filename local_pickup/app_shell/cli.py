import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import BinaryIO, TextIO

from local_pickup.api.boundary import InputParseError, parse_input, serialize_result
from local_pickup.api.schemas import PickupConfigResponse
from local_pickup.app_shell.config import RULES_PATH_ENV, resolve_rules_path
from local_pickup.components.pickup import PickupConfig, load_config_from_rules, run
from local_pickup.rules.loader import load_rules

logger = logging.getLogger("cli")


def get_config(rules_arg: str | None) -> PickupConfig:
    rules_path = resolve_rules_path(rules_arg)
    if not rules_path.exists():
        if rules_arg or os.environ.get(RULES_PATH_ENV):
            logger.error(f"Rules file {rules_path} not found.")
            sys.exit(1)
        # No rules file requested and none in cwd: canonical policy
        return PickupConfig()

    try:
        rules = load_rules(rules_path)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    return load_config_from_rules(rules.pickup)


def handle_run(args: argparse.Namespace, stdin: BinaryIO, stdout: TextIO) -> None:
    config = get_config(args.rules)

    if args.input:
        input_path = Path(args.input)
        if not input_path.exists():
            logger.error(f"Input file {input_path} not found.")
            sys.exit(1)
        payload = input_path.read_bytes()
    else:
        payload = stdin.read()

    try:
        function_input = parse_input(payload)
    except InputParseError as e:
        for error in e.errors:
            logger.error(error)
        sys.exit(1)

    result = run(function_input, config)
    json.dump(serialize_result(result), stdout, sort_keys=True, ensure_ascii=False)
    stdout.write("\n")


def handle_check_rules(args: argparse.Namespace, stdout: TextIO) -> None:
    config = get_config(args.rules)
    body = PickupConfigResponse.from_domain(config).model_dump(mode="json")
    json.dump(body, stdout, indent=2, ensure_ascii=False)
    stdout.write("\n")


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)

    parser = argparse.ArgumentParser(description="Local pickup delivery option generator")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # run
    run_parser = subparsers.add_parser("run", help="Evaluate function input JSON")
    run_parser.add_argument("--input", help="Path to input JSON (default: stdin)")
    run_parser.add_argument("--rules", help="Path to rules.yaml")

    # check-rules
    check_parser = subparsers.add_parser("check-rules", help="Validate rules and print config")
    check_parser.add_argument("--rules", help="Path to rules.yaml")

    args = parser.parse_args(argv)

    if args.command == "run":
        handle_run(args, sys.stdin.buffer, sys.stdout)
    elif args.command == "check-rules":
        handle_check_rules(args, sys.stdout)


if __name__ == "__main__":
    main()
