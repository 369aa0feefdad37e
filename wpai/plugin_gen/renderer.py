# wpai/plugin_gen/renderer.py
"""
Template renderer for WordPress plugin files.

Pure functions from a PluginConfig to file contents. No I/O, no clock, no
randomness: rendering the same config twice gives byte-identical output.

Usage:
    from wpai.plugin_gen.renderer import render_plugin

    files = render_plugin(config)
    # {"my-bot.php": "<?php ...", "readme.txt": "=== My Bot ===..."}

Feature flags decide which blocks exist in the PHP file at all. A disabled
flag removes its hook registration and its method; nothing is left behind
commented out.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from wpai.config.schema import GeneratorSettings
from wpai.logging.logger import get_logger
from wpai.logging.tags import GENERATOR
from wpai.plugin_gen.escaping import header_value, html_text, php_string, readme_line
from wpai.plugin_gen.types import PluginConfig, class_prefix, function_prefix
from wpai.plugin_gen.validators import validate_plugin_config

logger = get_logger(__name__)

README_FILENAME = "readme.txt"
BLOCK_NAMESPACE = "wp-ai-engine"

ConfigInput = Union[PluginConfig, Mapping[str, Any]]

_I1 = " " * 4
_I2 = " " * 8
_I3 = " " * 12
_I4 = " " * 16


def main_filename(config: PluginConfig) -> str:
    """Main plugin file name, ``<slug>.php``."""
    return f"{config.slug}.php"


# =============================================================================
# PHP blocks
# =============================================================================


def _header(config: PluginConfig, options: GeneratorSettings) -> List[str]:
    return [
        "<?php",
        "/**",
        f" * Plugin Name: {header_value(config.name)}",
        f" * Description: AI-powered {config.type.label} built with WP-AI Engine.",
        f" * Version: {config.version}",
        f" * Author: {header_value(options.author)}",
        f" * Text Domain: {config.slug}",
        " */",
        "",
        "if (!defined('ABSPATH')) exit;",
        "",
    ]


def _singleton(options: GeneratorSettings) -> List[str]:
    return [
        f"{_I1}private static $instance = null;",
        f"{_I1}private $api_endpoint = {php_string(options.api_endpoint)};",
        f"{_I1}private $api_key = {php_string(options.api_key_placeholder)}; "
        "// Provided via SaaS dashboard",
        "",
        f"{_I1}public static function get_instance() {{",
        f"{_I2}if (null === self::$instance) {{",
        f"{_I3}self::$instance = new self();",
        f"{_I2}}}",
        f"{_I2}return self::$instance;",
        f"{_I1}}}",
        "",
    ]


def _constructor(config: PluginConfig) -> List[str]:
    features = config.features
    prefix = function_prefix(config.slug)

    hooks = [
        "add_action('admin_menu', [$this, 'add_admin_menu']);",
        "add_action('admin_enqueue_scripts', [$this, 'enqueue_admin_assets']);",
    ]
    if features.use_shortcode:
        hooks.append(f"add_shortcode({php_string(config.slug)}, [$this, 'render_frontend']);")
    if features.use_gutenberg:
        hooks.append("add_action('init', [$this, 'register_block']);")
    hooks.append(f"add_action('wp_ajax_{prefix}_action', [$this, 'handle_ajax_request']);")
    if not features.require_auth:
        hooks.append(
            f"add_action('wp_ajax_nopriv_{prefix}_action', [$this, 'handle_ajax_request']);"
        )

    return (
        [f"{_I1}private function __construct() {{"]
        + [f"{_I2}{hook}" for hook in hooks]
        + [f"{_I1}}}", ""]
    )


def _admin_menu(config: PluginConfig, options: GeneratorSettings) -> List[str]:
    title = php_string(config.name)
    slug = php_string(config.slug)

    if config.features.show_in_menu:
        call = [
            f"{_I2}add_menu_page(",
            f"{_I3}{title},",
            f"{_I3}{title},",
            f"{_I3}'manage_options',",
            f"{_I3}{slug},",
            f"{_I3}[$this, 'render_admin_page'],",
            f"{_I3}{php_string(options.menu_icon)}",
            f"{_I2});",
        ]
    else:
        call = [
            f"{_I2}add_options_page(",
            f"{_I3}{title},",
            f"{_I3}{title},",
            f"{_I3}'manage_options',",
            f"{_I3}{slug},",
            f"{_I3}[$this, 'render_admin_page']",
            f"{_I2});",
        ]

    return (
        [f"{_I1}public function add_admin_menu() {{"]
        + call
        + [
            f"{_I1}}}",
            "",
            f"{_I1}public function enqueue_admin_assets() {{",
            f"{_I2}wp_enqueue_style('{config.slug}-css', 'https://cdn.tailwindcss.com');",
            f"{_I1}}}",
            "",
        ]
    )


def _admin_page(config: PluginConfig) -> List[str]:
    name = html_text(config.name)
    return [
        f"{_I1}public function render_admin_page() {{",
        f"{_I2}?>",
        f'{_I2}<div class="wrap bg-white p-8 rounded-lg shadow-sm mr-5 mt-5 border border-slate-200">',
        f'{_I3}<h1 class="text-3xl font-bold mb-4" style="color: {config.primary_color}">{name}</h1>',
        f'{_I3}<p class="text-slate-600 mb-2">Welcome to your AI-powered {config.type.label} dashboard.</p>',
        f'{_I3}<p class="text-slate-500 mb-6">{html_text(config.type.description)}.</p>',
        "",
        f'{_I3}<div id="{config.slug}-app" class="max-w-2xl">',
        f'{_I4}<div class="bg-slate-50 p-6 rounded border border-slate-200">',
        f'{_I4}    <h3 class="font-semibold mb-2">AI Settings</h3>',
        f'{_I4}    <div class="mb-4">',
        f'{_I4}        <label class="block text-sm font-medium mb-1">Your SaaS API Key</label>',
        f'{_I4}        <input type="password" value="************" readonly class="w-full border rounded p-2 bg-slate-100" />',
        f'{_I4}        <p class="text-xs text-slate-500 mt-1">Configure this in your WP-AI Engine dashboard.</p>',
        f"{_I4}    </div>",
        f'{_I4}    <button class="bg-blue-600 text-white px-4 py-2 rounded hover:bg-blue-700 transition">Test Connection</button>',
        f"{_I4}</div>",
        f"{_I3}</div>",
        f"{_I2}</div>",
        f"{_I2}<?php",
        f"{_I1}}}",
        "",
    ]


def _ajax_handler(config: PluginConfig) -> List[str]:
    prefix = function_prefix(config.slug)

    lines = [
        f"{_I1}public function handle_ajax_request() {{",
        f"{_I2}check_ajax_referer('{prefix}_nonce', 'security');",
        "",
    ]
    if config.features.require_auth:
        lines += [
            f"{_I2}if (!is_user_logged_in()) {{",
            f"{_I3}wp_send_json_error('Authentication required', 401);",
            f"{_I2}}}",
            "",
        ]
    lines += [
        f"{_I2}$user_input = sanitize_text_field(wp_unslash($_POST['input'] ?? ''));",
        "",
        f"{_I2}// Proxy request to WP-AI Engine SaaS",
        f"{_I2}$response = wp_remote_post($this->api_endpoint, [",
        f"{_I3}'body' => wp_json_encode([",
        f"{_I4}'api_key' => $this->api_key,",
        f"{_I4}'plugin_id' => {php_string(config.id)},",
        f"{_I4}'input' => $user_input,",
        f"{_I4}'prompt_template' => {php_string(config.prompt_template)}",
        f"{_I3}]),",
        f"{_I3}'headers' => ['Content-Type' => 'application/json']",
        f"{_I2}]);",
        "",
        f"{_I2}if (is_wp_error($response)) {{",
        f"{_I3}wp_send_json_error('Communication error');",
        f"{_I2}}}",
        "",
        f"{_I2}wp_send_json_success(json_decode(wp_remote_retrieve_body($response)));",
        f"{_I1}}}",
        "",
    ]
    return lines


def _block(config: PluginConfig) -> List[str]:
    return [
        f"{_I1}public function register_block() {{",
        f"{_I2}register_block_type('{BLOCK_NAMESPACE}/{config.slug}', [",
        f"{_I3}'render_callback' => [$this, 'render_frontend'],",
        f"{_I2}]);",
        f"{_I1}}}",
        "",
    ]


def _frontend(config: PluginConfig) -> List[str]:
    prefix = function_prefix(config.slug)
    return [
        f"{_I1}public function render_frontend() {{",
        f"{_I2}ob_start();",
        f"{_I2}?>",
        f'{_I2}<div id="{config.slug}-embed" class="wp-ai-container p-4 border rounded" '
        f'style="border-color: {config.primary_color}" '
        f'data-action="{prefix}_action" '
        f"data-ajax-url=\"<?php echo esc_url(admin_url('admin-ajax.php')); ?>\" "
        f"data-nonce=\"<?php echo esc_attr(wp_create_nonce('{prefix}_nonce')); ?>\">",
        f'{_I3}<h4 class="font-bold mb-2">{html_text(config.name)}</h4>',
        f'{_I3}<div class="ai-content">',
        f"{_I4}<!-- AI interaction happens here -->",
        f'{_I4}<p class="text-sm">Powered by WP-AI Engine</p>',
        f"{_I3}</div>",
        f"{_I2}</div>",
        f"{_I2}<?php",
        f"{_I2}return ob_get_clean();",
        f"{_I1}}}",
        "",
    ]


def _render_main_php(config: PluginConfig, options: GeneratorSettings) -> str:
    features = config.features
    class_name = f"{class_prefix(config.name)}_Plugin"

    lines = _header(config, options)
    lines.append(f"class {class_name} {{")
    lines += _singleton(options)
    lines += _constructor(config)
    lines += _admin_menu(config, options)
    lines += _admin_page(config)
    lines += _ajax_handler(config)
    if features.use_gutenberg:
        lines += _block(config)
    if features.use_shortcode or features.use_gutenberg:
        lines += _frontend(config)

    # Drop the blank line after the last method
    if lines[-1] == "":
        lines.pop()
    lines += ["}", "", f"{class_name}::get_instance();", ""]

    return "\n".join(lines)


def _render_readme(config: PluginConfig, options: GeneratorSettings) -> str:
    name = readme_line(config.name)

    return "\n".join(
        [
            f"=== {name} ===",
            f"Contributors: {readme_line(options.contributors)}",
            f"Requires at least: {readme_line(options.requires_at_least)}",
            f"Tested up to: {readme_line(options.tested_up_to)}",
            f"Stable tag: {config.version}",
            f"License: {readme_line(options.license)}",
            "",
            f"{name} is an AI-powered plugin generated using WP-AI Engine.",
            "",
        ]
    )


# =============================================================================
# Public API
# =============================================================================
# Each entry point validates exactly once, then hands the checked config to
# the private renderers.


def render_main_php(config: ConfigInput, options: Optional[GeneratorSettings] = None) -> str:
    """
    Render the main plugin file.

    Raises:
        ValidationError: If the config is incomplete or unsafe
    """
    return _render_main_php(validate_plugin_config(config), options or GeneratorSettings())


def render_readme(config: ConfigInput, options: Optional[GeneratorSettings] = None) -> str:
    """
    Render readme.txt in the WordPress plugin directory format.

    Raises:
        ValidationError: If the config is incomplete or unsafe
    """
    return _render_readme(validate_plugin_config(config), options or GeneratorSettings())


def render_plugin(
    config: ConfigInput, options: Optional[GeneratorSettings] = None
) -> Dict[str, str]:
    """
    Render every file of the plugin.

    Returns:
        Mapping of path (relative to the plugin folder) to file content:
        ``<slug>.php`` first, then ``readme.txt``.

    Raises:
        ValidationError: If the config is incomplete or unsafe; nothing is
            rendered in that case
    """
    config = validate_plugin_config(config)
    options = options or GeneratorSettings()

    files = {
        main_filename(config): _render_main_php(config, options),
        README_FILENAME: _render_readme(config, options),
    }
    logger.debug(f"{GENERATOR} Rendered {len(files)} files for {config.slug}")
    return files


__all__ = [
    "README_FILENAME",
    "main_filename",
    "render_main_php",
    "render_readme",
    "render_plugin",
]
