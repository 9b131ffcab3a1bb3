"""tgaction GitHub Actions step for Terragrunt.

Installs pinned Terraform and Terragrunt versions, runs a single Terragrunt
invocation, exposes the result through GITHUB_OUTPUT and optionally comments
it onto the triggering pull request or issue.

A layered CLI package following:
- CLI Architecture: Single entry point dispatcher with explicit parameters
- Domain Modeling: Parse-once pattern with type-safe models
- Services Pattern: Core services with dependency injection

Usage:
    python -m tgaction run
    tgaction run

Structure:
    tgaction/
    ├── __main__.py          # Entry point dispatcher
    ├── domain/              # Domain models (parse-once pattern)
    │   ├── config.py        # ActionConfig
    │   ├── event.py         # ReportTarget
    │   ├── hooks.py         # Pre-execution hooks
    │   └── invocation.py    # InvocationRequest, ExecutionResult
    ├── services/            # Business logic services
    │   ├── comment_reporter.py
    │   ├── git_setup.py
    │   ├── pre_exec.py
    │   └── tool_installer.py
    ├── infrastructure/      # External system interactions
    │   ├── github/          # GITHUB_OUTPUT, event payload, REST API
    │   ├── process/         # Subprocess execution
    │   ├── logs.py
    │   └── text.py
    └── commands/            # Thin command orchestrators
        └── run_action.py
"""

__version__ = "1.0.0"
