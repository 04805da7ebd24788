import sys

from .core import configure_logging
from .core.exceptions import BaseError
from .registry import ContainerRegistry, RegistryConfig
from .retag import Retagger


def main() -> None:
    """Run the interactive retag.

    Region and credentials come from the AWS SDK environment chain.
    """
    configure_logging()

    try:
        registry = ContainerRegistry.from_config(RegistryConfig())
        result = Retagger(registry).run()
    except BaseError as exc:
        print(str(exc), file=sys.stderr)
        raise SystemExit(exc.exit_code) from exc

    print(f"Tagged {result.repository_name}@{result.digest} as {result.tag}")


if __name__ == "__main__":
    main()
