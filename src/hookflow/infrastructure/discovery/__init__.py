"""Hook discovery from modules and source files."""

from hookflow.infrastructure.discovery.hook_loader import DiscoveryResult, HookLoader

__all__ = ["HookLoader", "DiscoveryResult"]
