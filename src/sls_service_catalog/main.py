"""
Command-line interface for compiling a service's functions into
Service Catalog provisioned products.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn

from ruamel.yaml import YAML

from sls_service_catalog.compiler import AwsCompileServiceCatalog
from sls_service_catalog.config.service_parser import ServiceFileParser
from sls_service_catalog.core.exceptions import (
    InvalidEnvironmentKey,
    InvalidEnvironmentValue,
    MissingArtifact,
    ServiceCatalogPluginError,
    ServiceConfigurationError,
    TemplateLoadError,
)
from sls_service_catalog.core.io import FileArtifactStore, FileLoader


def configure_logging(debug: bool = False, verbose: bool = False) -> None:
    """Configure application logging.

    Args:
        debug: Enable debug-level logging if True.
        verbose: Enable verbose logging with timestamps if True.
    """
    if debug:
        level = logging.DEBUG
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif verbose:
        level = logging.INFO
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        level = logging.WARNING
        format_str = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stderr,
        force=True,  # Override existing configuration
    )


def load_existing_template(template_file: Path | None) -> dict[str, Any]:
    """Load a previously compiled template, or start from an empty one."""
    if template_file is None:
        return {"Resources": {}, "Outputs": {}}

    document = FileLoader().load(template_file)
    if not isinstance(document, dict):
        raise TemplateLoadError(
            "Compiled template must be a mapping", template_path=str(template_file)
        )
    document.setdefault("Resources", {})
    return document


def write_document(document: dict[str, Any], output_file: Path | None) -> None:
    """Write the compiled template as JSON, or YAML for .yml/.yaml outputs."""
    if output_file is None:
        json.dump(document, sys.stdout, indent=2)
        sys.stdout.write("\n")
        return

    output_file.parent.mkdir(parents=True, exist_ok=True)
    if output_file.suffix.lower() in {".yaml", ".yml"}:
        yaml = YAML()
        yaml.default_flow_style = False
        yaml.width = 4096
        with output_file.open("w", encoding="utf-8") as f:
            yaml.dump(document, f)
    else:
        output_file.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description=(
            "Compile serverless functions into AWS Service Catalog "
            "provisioned product resources"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the compiled template for a service
  python -m sls_service_catalog.main serverless.yml

  # Merge into an existing compiled template and save it
  python -m sls_service_catalog.main serverless.yml \\
    --template .serverless/cloudformation-template-update-stack.json \\
    -o output/template.json --stage prod
        """,
    )
    parser.add_argument("service_file", type=Path, help="Path to serverless.yml")
    parser.add_argument(
        "-o",
        "--output",
        dest="output_file",
        type=Path,
        help="Where to save the compiled template (default: stdout)",
    )
    parser.add_argument(
        "-t",
        "--template",
        dest="template_file",
        type=Path,
        help="Existing compiled template to merge resources into",
    )
    parser.add_argument("--stage", help="Stage override (default: provider stage)")
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging for detailed output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    return parser.parse_args(argv)


def run_compilation(
    service_file: Path,
    output_file: Path | None = None,
    template_file: Path | None = None,
    stage: str | None = None,
    debug: bool = False,
    verbose: bool = False,
) -> NoReturn:
    """Execute the compilation and exit.

    Raises:
        SystemExit: Always exits with appropriate code (0 for success, >0 for errors).
    """
    configure_logging(debug, verbose)
    logger = logging.getLogger(__name__)

    try:
        service = ServiceFileParser().parse(service_file)
        base_dir = service_file.parent
        plugin = AwsCompileServiceCatalog(
            service,
            options={"stage": stage},
            artifact_store=FileArtifactStore(base_dir),
            loader=FileLoader(base_dir),
        )

        document = load_existing_template(template_file)
        plugin.hooks["package:compileFunctions"](document)
        write_document(document, output_file)

        if output_file is not None:
            logger.info(f"Compiled template saved to: {output_file.resolve()}")
        sys.exit(0)

    except ServiceConfigurationError as e:
        logger.error(f"Service configuration error: {e}")
        logger.info(f"Suggestion: {e.get_recovery_hint()}")
        sys.exit(1)
    except (InvalidEnvironmentKey, InvalidEnvironmentValue) as e:
        logger.error(f"Environment validation error: {e}")
        logger.info(f"Suggestion: {e.get_recovery_hint()}")
        sys.exit(2)
    except MissingArtifact as e:
        logger.error(f"Missing artifact: {e}")
        logger.info(f"Suggestion: {e.get_recovery_hint()}")
        sys.exit(3)
    except TemplateLoadError as e:
        logger.error(f"Template load error: {e}")
        sys.exit(4)
    except ServiceCatalogPluginError as e:
        logger.error(f"Service Catalog plugin error: {e}")
        sys.exit(5)
    except (PermissionError, FileNotFoundError, OSError) as e:
        logger.error(f"File system error: {e}")
        sys.exit(8)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if debug:
            logger.exception("Full traceback:")
        sys.exit(9)


def main(argv: list[str] | None = None) -> NoReturn:
    args = parse_arguments(argv)
    run_compilation(
        args.service_file,
        output_file=args.output_file,
        template_file=args.template_file,
        stage=args.stage,
        debug=args.debug,
        verbose=args.verbose,
    )


if __name__ == "__main__":
    main()
