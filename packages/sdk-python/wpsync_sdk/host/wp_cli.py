"""
WP-CLI Host
===========

Reads the runtime state of a WordPress install by shelling out to ``wp``:

- ``wp core version``
- ``wp plugin list`` (active, network-active and must-use plugins)
- ``wp theme list`` / ``wp theme get`` (active theme, or its parent)
- ``wp eval`` for the plugin, mu-plugin and theme directories
"""

import json
import subprocess
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from wpsync_common import HostError, get_logger
from wpsync_common.constants import DEFAULT_WP_BIN
from wpsync_schema import ComponentDescriptor, ComponentKind

logger = get_logger(__name__)

ACTIVE_STATUSES = ("active", "active-network")
MUST_USE_STATUS = "must-use"

PLUGIN_FIELDS = "name,title,version,status,file"
THEME_FIELDS = "name,title,version,stylesheet,template"

DIRECTORIES_PHP = (
    "echo wp_json_encode(array("
    "'plugin' => WP_PLUGIN_DIR, "
    "'mu-plugin' => WPMU_PLUGIN_DIR, "
    "'theme' => get_theme_root()"
    "));"
)


class WpCliHost:
    """
    WordPressHost backed by the wp-cli binary.

    Args:
        wp_bin: wp-cli executable
        path: WordPress root passed as ``--path``; None uses wp-cli's own lookup
        extra_args: Additional global arguments (e.g. ``--allow-root``)
        runner: subprocess.run compatible callable
    """

    def __init__(
        self,
        wp_bin: str = DEFAULT_WP_BIN,
        path: Optional[str] = None,
        extra_args: Optional[Sequence[str]] = None,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        self.wp_bin = wp_bin
        self.path = path
        self.extra_args = list(extra_args or [])
        self.runner = runner
        self._plugins: Optional[List[Dict[str, Any]]] = None

    # ------------------------------------------------------------------
    # wp-cli plumbing
    # ------------------------------------------------------------------

    def _command(self, args: Sequence[str]) -> List[str]:
        command = [self.wp_bin, *args]
        if self.path:
            command.append(f"--path={self.path}")
        command.extend(self.extra_args)
        return command

    def _run(self, *args: str) -> str:
        command = self._command(args)
        display = " ".join(command)
        logger.debug(f"Running: {display}")
        try:
            result = self.runner(command, capture_output=True, text=True, check=False)
        except FileNotFoundError:
            raise HostError(
                f"wp-cli not found: '{self.wp_bin}'. Install it from https://wp-cli.org/",
                command=display,
            )

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise HostError(
                f"wp-cli command failed ({result.returncode}): {display}",
                command=display,
                stderr=stderr,
            )
        return result.stdout or ""

    def _run_json(self, *args: str) -> Any:
        output = self._run(*args)
        try:
            return json.loads(output)
        except json.JSONDecodeError:
            raise HostError(
                f"Unexpected wp-cli output for: {' '.join(args)}",
                command=" ".join(self._command(args)),
            )

    def _plugin_list(self) -> List[Dict[str, Any]]:
        if self._plugins is None:
            plugins = self._run_json("plugin", "list", f"--fields={PLUGIN_FIELDS}", "--format=json")
            self._plugins = [p for p in plugins if isinstance(p, dict)]
        return self._plugins

    # ------------------------------------------------------------------
    # WordPressHost
    # ------------------------------------------------------------------

    def core_version(self) -> str:
        return self._run("core", "version").strip()

    def active_plugins(self) -> List[ComponentDescriptor]:
        descriptors = []
        for plugin in self._plugin_list():
            if plugin.get("status") not in ACTIVE_STATUSES:
                continue
            plugin_file = plugin.get("file") or ""
            slug = plugin_file.split("/")[0] if "/" in plugin_file else plugin.get("name", "")
            descriptors.append(
                ComponentDescriptor(
                    kind=ComponentKind.PLUGIN,
                    display_name=plugin.get("title") or plugin.get("name", ""),
                    raw_version=plugin.get("version"),
                    slug=slug,
                )
            )
        return descriptors

    def mu_plugins(self) -> List[ComponentDescriptor]:
        descriptors = []
        for plugin in self._plugin_list():
            if plugin.get("status") != MUST_USE_STATUS:
                continue
            plugin_file = plugin.get("file") or plugin.get("name", "")
            single_file = "/" not in plugin_file
            slug = Path(plugin_file).stem if single_file else plugin_file.split("/")[0]
            descriptors.append(
                ComponentDescriptor(
                    kind=ComponentKind.MU_PLUGIN,
                    display_name=plugin.get("title") or plugin.get("name", ""),
                    raw_version=plugin.get("version"),
                    slug=slug,
                    single_file=single_file,
                )
            )
        return descriptors

    def active_theme(self) -> Optional[ComponentDescriptor]:
        active = self._run_json("theme", "list", "--status=active", "--fields=name", "--format=json")
        if not active:
            return None

        theme = self._run_json(
            "theme", "get", active[0]["name"], f"--fields={THEME_FIELDS}", "--format=json"
        )
        template = theme.get("template")
        if template and template != theme.get("stylesheet"):
            logger.debug(f"Active theme is a child of '{template}', using the parent")
            theme = self._run_json(
                "theme", "get", template, f"--fields={THEME_FIELDS}", "--format=json"
            )

        return ComponentDescriptor(
            kind=ComponentKind.THEME,
            display_name=theme.get("name") or theme.get("title", ""),
            raw_version=theme.get("version"),
            slug=theme.get("stylesheet", ""),
        )

    def component_directories(self) -> Dict[ComponentKind, Path]:
        dirs = self._run_json("eval", DIRECTORIES_PHP)
        if not isinstance(dirs, dict):
            raise HostError("Unexpected wp-cli output for component directories")
        return {ComponentKind(kind): Path(path) for kind, path in dirs.items() if path}
