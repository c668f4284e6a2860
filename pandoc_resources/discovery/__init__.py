"""Discovery module for resource listing."""

from pandoc_resources.discovery.scanner import ResourceScanner

__all__ = ["ResourceScanner"]
