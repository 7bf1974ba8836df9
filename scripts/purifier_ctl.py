#!/usr/bin/env python3
"""
Query or control a Daikin air purifier from the command line.

Usage:
    python scripts/purifier_ctl.py --ip 192.168.1.40 status
    python scripts/purifier_ctl.py --ip 192.168.1.40 auto
    python scripts/purifier_ctl.py --ip 192.168.1.40 --refresh-interval 5000 watch
"""

import argparse
import asyncio
import json
import logging
import sys

from daikin_purifier import (
    Active,
    AirPurifier,
    Characteristic,
    DaikinException,
    PurifierConfig,
    TargetPurifierState,
)

COMMANDS = ("status", "on", "off", "auto", "manual", "watch")


def _make_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Query or control a Daikin air purifier"
    )
    p.add_argument("--ip", required=True, help="IP or hostname of the purifier")
    p.add_argument("--timeout", type=float, default=5.0,
                   help="Request timeout in seconds (default: 5.0)")
    p.add_argument("--refresh-interval", type=int, default=10000,
                   help="Poll interval for 'watch' in milliseconds (default: 10000)")
    p.add_argument("--format", choices=["json", "text"], default="text",
                   help="Output format for 'status' (default: text)")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("command", choices=COMMANDS)
    return p


async def show_status(purifier: AirPurifier, fmt: str) -> None:
    """Print accessory metadata and the three semantic states."""
    info = await purifier.get_accessory_information()
    active = await purifier.get_active()
    current = await purifier.get_current_state()
    # INACTIVE while switched off
    target = await purifier.get_target_state()

    if fmt == "json":
        output = json.dumps({
            **info.model_dump(),
            "active": active.name,
            "current_state": current.name,
            "target_state": target.name,
        }, indent=2, ensure_ascii=False)
    else:
        lines = [
            f"{info.manufacturer} {info.model} ({info.name})",
            f"  Serial number: {info.serial_number}",
            f"  Firmware:      {info.firmware_revision or 'unknown'}",
            f"  Active:        {active.name}",
            f"  Current state: {current.name}",
            f"  Target state:  {target.name}",
        ]
        output = "\n".join(lines)
    print(output)


async def watch(purifier: AirPurifier) -> None:
    """Poll until interrupted, printing every pushed value."""
    async def on_update(characteristic: Characteristic, value: int) -> None:
        print(f"{characteristic.value} = {value}", flush=True)

    purifier.register_update_callback(on_update)
    async with purifier:
        await purifier.poll_once()
        await asyncio.Event().wait()


async def _async_main(args: argparse.Namespace) -> int:
    config = PurifierConfig(
        ip=args.ip,
        refresh_interval=args.refresh_interval,
        timeout=args.timeout,
    )
    purifier = AirPurifier.from_config(config)

    try:
        if args.command == "watch":
            await watch(purifier)
            return 0

        if args.command == "status":
            await show_status(purifier, args.format)
            return 0

        if args.command in ("on", "off"):
            ok = await purifier.set_active(Active.ACTIVE if args.command == "on" else Active.INACTIVE)
        else:
            ok = await purifier.set_target_state(
                TargetPurifierState.AUTO if args.command == "auto" else TargetPurifierState.MANUAL
            )
        if not ok:
            print(f"Purifier rejected '{args.command}'", file=sys.stderr)
            return 1
        print(f"'{args.command}' accepted")
        return 0
    except DaikinException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        await purifier.close()


def main():
    parser = _make_argparser()
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s: %(message)s',
    )
    try:
        sys.exit(asyncio.run(_async_main(args)))
    except KeyboardInterrupt:
        print("Aborted by user", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
