"""Main CLI entry point with command routing."""

import sys


def main() -> None:
    """Main CLI entry point."""
    # Check for CLI dependencies
    try:
        from termtint.cli.app import create_app
        app = create_app()
    except ImportError:
        # Minimal fallback without typer
        _fallback_main()
        return
    app()


def _fallback_main() -> None:
    """Minimal CLI when typer is not installed."""
    args = sys.argv[1:]

    if not args or args[0] in ("-h", "--help"):
        print("termtint - capability-aware terminal colors")
        print()
        print("Install CLI extras for full functionality:")
        print("  pip install termtint[cli]")
        print()
        print("Basic usage (library mode):")
        print("  python -c \"import termtint; print(termtint.current_tier())\"")
        return

    if args[0] == "detect":
        # Basic detect command without rich output
        from termtint.control.capability import get_resolver
        resolver = get_resolver()
        print(f"detected: {resolver.detected_tier().name}")
        print(f"resolved: {resolver.current_tier().name}")
        return

    print(f"Unknown command: {args[0]}")
    print("Install CLI extras: pip install termtint[cli]")
    sys.exit(1)


if __name__ == "__main__":
    main()
