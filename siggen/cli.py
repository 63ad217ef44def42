"""Command-line front end.

Usage::

    siggen out.wav plain 440 2.0 90 sine
    siggen -r 48000 out.wav combo 440 0.5 0.25 45 triangle
    siggen out.wav modulate 3.0 440 sine 2 triangle
"""

import argparse
import os
import sys
from typing import List, Optional, Union

from pydantic import ValidationError

from .audio import render
from .logger import configure_logging
from .models import DEFAULT_RATE, AnySettingsAdapter, ComboSettings, ModulateSettings, PlainSettings
from .shapes import WAVEFORMS

__version__ = "0.1.0"

ENV_RATE = "SIGGEN_SAMPLE_RATE"


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="siggen", description="Signal generator")
	parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
	parser.add_argument(
		"-r",
		"--rate",
		type=int,
		default=os.environ.get(ENV_RATE, DEFAULT_RATE),
		metavar="SAMPLE_RATE",
		help=f"Sample rate in Hz (default: {DEFAULT_RATE}, or ${ENV_RATE}).",
	)
	parser.add_argument(
		"--log-level",
		default="INFO",
		choices=["DEBUG", "INFO", "WARNING", "ERROR"],
		help="Logging verbosity (default: INFO).",
	)
	parser.add_argument("--log-file", default=None, help="Also write log records to this file.")
	parser.add_argument("output", metavar="OUTPUT", help="name of output file")

	sub = parser.add_subparsers(dest="mode", required=True, metavar="MODE")

	p = sub.add_parser("plain", help="Generates a plain wave")
	p.add_argument("frequency", metavar="FREQ", type=float, help="signal frequency in Hz")
	p.add_argument("duration", metavar="DURATION", type=float, help="signal duration in Sec")
	p.add_argument("phase", metavar="PHASE", type=float, help="phase shift in Degree")
	p.add_argument("shape", metavar="SHAPE", choices=WAVEFORMS, help="shape of signal")

	c = sub.add_parser("combo", help="Generates a combo wave")
	c.add_argument("frequency", metavar="FREQ", type=float, help="signal frequency in Hz")
	c.add_argument("duration", metavar="DURATION", type=float, help="signal duration in Sec")
	c.add_argument("silence", metavar="SILENCE", type=float, help="silence duration in Sec")
	c.add_argument("phase_step", metavar="PHASE", type=float, help="phase shift in Degree")
	c.add_argument("shape", metavar="SHAPE", choices=WAVEFORMS, help="shape of signal")

	m = sub.add_parser("modulate", help="Generates a modulated wave")
	m.add_argument("duration", metavar="DURATION", type=float, help="signal duration in Sec")
	m.add_argument("frequency_1", metavar="FREQ1", type=float, help="first frequency in Hz")
	m.add_argument("shape_1", metavar="SHAPE1", choices=WAVEFORMS, help="first shape")
	m.add_argument("frequency_2", metavar="FREQ2", type=float, help="second frequency in Hz")
	m.add_argument("shape_2", metavar="SHAPE2", choices=WAVEFORMS, help="second shape")
	return parser


def _summarize(e: ValidationError) -> str:
	parts = []
	for err in e.errors():
		# loc starts with the mode tag of the union
		field = ".".join(str(p) for p in err["loc"][1:]) or str(err["loc"][0])
		parts.append(f"{field}: {err['msg']}")
	return "; ".join(parts)


def settings_from_args(args: argparse.Namespace) -> Union[PlainSettings, ComboSettings, ModulateSettings]:
	fields = {k: v for k, v in vars(args).items() if k not in ("output", "log_level", "log_file")}
	return AnySettingsAdapter.validate_python(fields)


def main(argv: Optional[List[str]] = None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)
	logger = configure_logging(level=args.log_level, log_file=args.log_file)

	try:
		settings = settings_from_args(args)
	except ValidationError as e:
		parser.error(f"invalid {args.mode} configuration: {_summarize(e)}")

	try:
		render(args.output, settings)
	except (OSError, RuntimeError) as e:
		logger.error("failed to write %s: %s", args.output, e)
		return 1
	return 0


if __name__ == "__main__":
	sys.exit(main())
