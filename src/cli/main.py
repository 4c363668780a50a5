"""
Calculator driver — интерактивная обёртка над BigInteger

Читает два больших числа и делитель из stdin, печатает сумму, разность,
произведение и частное. Вся арифметика выполняется ядром; драйвер только
разбирает токены и форматирует вывод.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from src.cli.logging_setup import setup_logging
from src.core.arith import KARATSUBA_THRESHOLD, BigIntegerParseError, MultiplicationConfig
from src.core.domain import BigInteger, read_big_integer, read_token

logger = logging.getLogger(__name__)


def read_int(stream: TextIO) -> int:
    """
    Чтение делителя: следующий токен потока в формате -?[0-9]+.

    Raises:
        EOFError: Если токенов не осталось
        BigIntegerParseError: Если токен не является десятичным целым
    """
    return BigInteger.from_str(read_token(stream)).to_int()


def run(
    stdin: TextIO,
    stdout: TextIO,
    config: Optional[MultiplicationConfig] = None,
) -> None:
    """Один сеанс калькулятора: два числа, затем делитель."""
    stdout.write("Enter two large numbers:\n")
    stdout.flush()
    a = read_big_integer(stdin)
    b = read_big_integer(stdin)
    logger.info("operands: %d and %d limbs", len(a.digits), len(b.digits))

    stdout.write(f"Sum = {a + b}\n")
    stdout.write(f"Difference = {a - b}\n")
    stdout.write(f"Product = {a.multiply(b, config)}\n")

    stdout.write("Enter an integer to divide first number by: ")
    stdout.flush()
    divisor = read_int(stdin)
    stdout.write(f"Quotient = {a.divide_by_int(divisor)}\n")
    stdout.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bigint-calc",
        description="Arbitrary-precision integer calculator: sum, difference, "
        "product and single-word quotient of two decimal numbers read from stdin.",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=KARATSUBA_THRESHOLD,
        help=f"Karatsuba base-case cutover in limbs (default: {KARATSUBA_THRESHOLD})",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-format",
        default="text",
        choices=["text", "json"],
        help="log record format (default: text)",
    )
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = build_parser().parse_args(argv)
    previous_level = logging.root.level
    handler = setup_logging(args.log_level, args.log_format)

    try:
        config = MultiplicationConfig(threshold=args.threshold)
        run(stdin or sys.stdin, stdout or sys.stdout, config)
    except (BigIntegerParseError, ZeroDivisionError, ValueError, EOFError) as exc:
        logger.debug("calculator aborted", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(previous_level)
    return 0
