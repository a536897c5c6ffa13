"""Main entry point for the Agentic Tools server and CLI."""

import argparse
import json
import logging
import signal
import sys

from pydantic import ValidationError

from agentic_tools import __version__
from agentic_tools.errors import AgenticToolsError
from agentic_tools.server.stdio import ToolServer
from agentic_tools.tools import ComplexityAnalysisTool, ListMemoriesTool, build_tools
from agentic_tools.tools.base import format_validation_error
from agentic_tools.utils.config import config_section, resolve_config
from agentic_tools.utils.logging_config import configure_logging
from agentic_tools.utils.storage_config import StorageConfig, get_global_storage_directory

logger = logging.getLogger(__name__)


def _shutdown(signum, frame):
    """Exit cleanly on SIGINT/SIGTERM."""
    logger.info("Shutting down server...")
    sys.exit(0)


def run_server(config: dict, storage_config: StorageConfig):
    """Serve every tool over stdio until the client disconnects."""
    server_config = config_section(config, 'server')
    name = server_config.get('name', 'agentic-tools')
    version = server_config.get('version', __version__)

    signal.signal(signal.SIGINT, _shutdown)
    signal.signal(signal.SIGTERM, _shutdown)

    tools = build_tools(config, storage_config)
    server = ToolServer(tools, name=name, version=version)

    logger.info("%s %s started successfully", name, version)
    if storage_config.use_global_directory:
        logger.info("Global directory mode: using %s for all data storage",
                    get_global_storage_directory(storage_config))
    else:
        logger.info("Project-specific mode: using %s/ within each working directory",
                    storage_config.directory_name)
    logger.info("Tools available: %s", ', '.join(tool.name for tool in tools))

    server.run()


def _analysis_arguments(args) -> dict:
    """Only flags the user actually set; everything else falls back to config."""
    arguments = {
        'workingDirectory': args.working_directory,
        'taskId': args.task_id,
        'projectId': args.project_id,
    }
    if args.threshold is not None:
        arguments['complexityThreshold'] = args.threshold
    if args.no_breakdown:
        arguments['suggestBreakdown'] = False
    if args.auto_create:
        arguments['autoCreateSubtasks'] = True
    return arguments


def run_analysis(args, config: dict, storage_config: StorageConfig) -> int:
    """Run one complexity analysis and print the report or the raw result."""
    tool = ComplexityAnalysisTool(config, storage_config)
    arguments = _analysis_arguments(args)

    if not args.json:
        response = tool.call(arguments)
        print(response.text)
        return 1 if response.is_error else 0

    try:
        results = tool.run(tool.parse_arguments(arguments))
    except ValidationError as e:
        print(f"Error: Invalid arguments for {tool.name}: {format_validation_error(e)}", file=sys.stderr)
        return 1
    except (AgenticToolsError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if results is None:
        print('No tasks found for analysis.')
        return 0
    print(json.dumps(results.to_dict(), indent=2, default=str))
    return 0


def run_list_memories(args, config: dict, storage_config: StorageConfig) -> int:
    """List memories once and print the result."""
    arguments = {'workingDirectory': args.working_directory, 'category': args.category}
    if args.limit is not None:
        arguments['limit'] = args.limit

    response = ListMemoriesTool(config, storage_config).call(arguments)
    print(response.text)
    return 1 if response.is_error else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Agentic Tools: task and memory management tools for agents"
    )
    parser.add_argument(
        'command',
        choices=['serve', 'analyze', 'list-memories'],
        help='Command to run'
    )
    parser.add_argument(
        '--config',
        type=str,
        default='agentic-tools.yaml',
        help='Path to configuration file (default: agentic-tools.yaml)'
    )
    parser.add_argument(
        '--claude',
        action='store_true',
        help='Store all data in the global ~/.agentic-tools-mcp directory'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        help='Logging level (default: from config, INFO)'
    )
    parser.add_argument(
        '--working-directory',
        type=str,
        default=None,
        help='Working directory whose data store to use'
    )
    parser.add_argument('--task-id', type=str, default=None, help='Analyze a single task')
    parser.add_argument('--project-id', type=str, default=None, help='Analyze one project')
    parser.add_argument(
        '--threshold',
        type=float,
        default=None,
        help='Complexity threshold 1-10 (default: 7)'
    )
    parser.add_argument('--no-breakdown', action='store_true', help='Skip breakdown suggestions')
    parser.add_argument('--auto-create', action='store_true', help='Create suggested subtasks')
    parser.add_argument('--json', action='store_true', help='Print the raw analysis result as JSON')
    parser.add_argument('--category', type=str, default=None, help='Memory category filter')
    parser.add_argument('--limit', type=int, default=None, help='Maximum memories to list')
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    config = resolve_config(args.config)
    configure_logging(args.log_level or config_section(config, 'logging').get('level', 'INFO'))
    storage_config = StorageConfig.from_config(config, use_global_directory=args.claude)

    if args.command == 'serve':
        try:
            run_server(config, storage_config)
        except Exception:
            logger.exception("Failed to start server")
            sys.exit(1)
    elif args.command == 'analyze':
        sys.exit(run_analysis(args, config, storage_config))
    elif args.command == 'list-memories':
        sys.exit(run_list_memories(args, config, storage_config))


if __name__ == "__main__":
    main()
