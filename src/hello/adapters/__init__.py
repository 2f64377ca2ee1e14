"""Adapters: rich-click CLI, lib_layered_config configuration, lib_log_rich logging."""
