"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Output formatting and error reporting
"""
import argparse
import sys
from typing import Any, Callable, Dict, List, Optional

import yaml

from oopatterns import __version__
from oopatterns.bootstrap import Application
from oopatterns.cli.formatters import format_output
from oopatterns.config import SingletonDemoConfig
from oopatterns.domain.base.exceptions import DomainException
from oopatterns.domain.composite import (
    DeliveryService,
    boxes_from_document,
    count_items,
    demo_order,
)
from oopatterns.domain.policy import (
    POLICY_TYPES,
    available_policy_types,
    get_policy_steps,
    price_policy,
)
from oopatterns.domain.singleton import Singleton, check_singleton_identity
from oopatterns.infrastructure.logging.logger import get_logger
from oopatterns.infrastructure.patterns import get_singleton
from oopatterns.infrastructure.utilities import read_structured_file

logger = get_logger(__name__)


def _thread_count(value: str) -> int:
    """Parse --threads with the same bounds as the singleton configuration."""
    try:
        return SingletonDemoConfig(threads=int(value)).threads
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid thread count {value!r}: must be an integer between 1 and 256"
        ) from None


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="oopatterns",
        description="Object-oriented design pattern demonstrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s singleton --threads 16             # Race 16 threads for the first instance
  %(prog)s policy list                        # List policy types
  %(prog)s policy price commercial_auto       # Price a policy
  %(prog)s delivery price --file order.yaml   # Price an order document
  %(prog)s --format table delivery price      # Price the demo order as a table
        """
    )

    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=['json', 'yaml', 'table'],
                        default='json', help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='resource', help='Available demonstrations')
    subparsers.required = True

    singleton_parser = subparsers.add_parser('singleton', help='Check singleton identity')
    singleton_parser.add_argument('--threads', type=_thread_count,
                                  help='Threads racing for the first instance (default from config)')

    policy_parser = subparsers.add_parser('policy', help='Template method: price insurance policies')
    policy_subparsers = policy_parser.add_subparsers(dest='action', help='Policy actions')
    policy_subparsers.required = True
    policy_subparsers.add_parser('list', help='List policy types')
    policy_price = policy_subparsers.add_parser('price', help='Price one or more policies')
    policy_price.add_argument('policy_types', nargs='+', metavar='TYPE', help='Policy type to price')
    policy_price.add_argument('--account-number', type=int, default=0, help='Account number on the quote')

    delivery_parser = subparsers.add_parser('delivery', help='Composite: price a delivery order')
    delivery_subparsers = delivery_parser.add_subparsers(dest='action', help='Delivery actions')
    delivery_subparsers.required = True
    delivery_price = delivery_subparsers.add_parser('price', help='Price an order')
    delivery_price.add_argument('--file', help='Order document (JSON or YAML); demo order when omitted')

    return parser.parse_args(argv)


def handle_singleton(app: Application, args: argparse.Namespace) -> Dict[str, Any]:
    threads = args.threads if args.threads is not None else app.config.singleton.threads

    # The threads race for creation only while no instance exists yet
    raced_creation = not Singleton.has_instance()
    report = check_singleton_identity(Singleton.get_instance, threads=threads)

    first = get_singleton(Singleton)
    first.a_method()
    second = get_singleton(Singleton)
    second.a_method()
    same = first is second and report.all_identical and first is Singleton.get_instance()

    return {
        "singleton": {
            "raced_creation": raced_creation,
            "sequential_identical": first is second,
            **report.to_dict(),
            "container_owned": app.container.has(Singleton),
            "result": "Correct: all accesses returned the same instance" if same
            else "Error: different instances were returned",
        },
        "success": same,
    }


def handle_policy(app: Application, args: argparse.Namespace) -> Dict[str, Any]:
    if args.action == 'list':
        return {
            "policy_types": [
                {"name": name, "description": POLICY_TYPES[name].description}
                for name in available_policy_types()
            ]
        }

    quotes = [
        price_policy(get_policy_steps(policy_type), account_number=args.account_number)
        for policy_type in args.policy_types
    ]
    return {"quotes": [quote.to_dict() for quote in quotes]}


def handle_delivery(app: Application, args: argparse.Namespace) -> Dict[str, Any]:
    if args.file:
        try:
            document = read_structured_file(args.file)
        except OSError as e:
            raise DomainException(f"Could not read order file {args.file}: {e.strerror or e}") from e
        except (ValueError, yaml.YAMLError) as e:
            raise DomainException(f"Could not parse order file {args.file}: {e}") from e
        except RecursionError as e:
            raise DomainException(f"Could not parse order file {args.file}: nesting too deep") from e
        boxes = boxes_from_document(document)
    else:
        boxes = demo_order()

    service = app.get_service(DeliveryService)
    service.setup_order(*boxes)
    price = service.calculate_order_price()
    return {
        "delivery": {
            "source": args.file or "demo",
            "boxes": len(boxes),
            "items": count_items(service.box),
            "total_price": price,
        }
    }


HANDLERS: Dict[str, Callable[[Application, argparse.Namespace], Dict[str, Any]]] = {
    'singleton': handle_singleton,
    'policy': handle_policy,
    'delivery': handle_delivery,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        app = Application(config_path=args.config, log_level=args.log_level)
        app.initialize()

        result = HANDLERS[args.resource](app, args)
        success = result.pop("success", True)
        print(format_output(result, args.format))
        return 0 if success else 1
    except DomainException as e:
        logger.error("Command failed", error=str(e), command=args.resource)
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
