"""OO Architecture Patterns - Root Package.

Runnable demonstrations of classic object-oriented design patterns for a
course on object-oriented architecture.

Key Components:
    - domain.composite: priceable box trees and the delivery service
    - domain.singleton: lazily created, lock-guarded single instance
    - domain.policy: insurance policy pricing with a fixed step sequence
    - infrastructure: logging, dependency injection and singleton access
    - config: typed application configuration
    - cli: command-line entry point

Usage:
    >>> oopatterns delivery price
    >>> oopatterns policy price commercial_auto business_owners
    >>> oopatterns singleton --threads 16
"""

__version__ = "1.0.0"
PACKAGE_NAME = "oo-architecture-patterns"
