import math
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal('0.01')

# Beyond this magnitude a float has no fractional digits left to round.
_MAX_ROUNDABLE = 1e21
# Below this magnitude numbers render in exponent form.
_MIN_PLAIN = 1e-6


def round_to_cents(value: float) -> float:
	"""Round half-up to two decimals, working from the shortest repr of ``value``."""
	if not math.isfinite(value) or abs(value) >= _MAX_ROUNDABLE:
		return value
	rounded = float(Decimal(repr(float(value))).quantize(CENT, rounding=ROUND_HALF_UP))
	# -0.0 + 0.0 is 0.0
	return rounded + 0.0


def format_number(value: float | int) -> str:
	"""Render a number the way an ECMAScript number-to-string does.

	Plain decimal for 1e-6 <= |value| < 1e21, shortest exponent form otherwise.

	>>> format_number(92.0)
	'92'
	>>> format_number(0.00005)
	'0.00005'
	>>> format_number(1e-7)
	'1e-7'
	"""
	number = float(value)
	if math.isnan(number):
		return 'NaN'
	if math.isinf(number):
		return 'Infinity' if number > 0 else '-Infinity'
	if number == 0:
		return '0'

	if _MIN_PLAIN <= abs(number) < _MAX_ROUNDABLE:
		text = format(Decimal(repr(number)), 'f')
		if '.' in text:
			text = text.rstrip('0').rstrip('.')
		return text

	mantissa, exponent = repr(number).split('e')
	exponent = int(exponent)
	return f'{mantissa}e{"+" if exponent >= 0 else "-"}{abs(exponent)}'


def utc_now() -> datetime:
	return datetime.now(UTC)


def to_iso_timestamp(moment: datetime) -> str:
	"""ISO 8601 in UTC with millisecond precision and a ``Z`` suffix."""
	return moment.astimezone(UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def from_unix_seconds(seconds: int | float) -> datetime:
	return datetime.fromtimestamp(seconds, tz=UTC)
