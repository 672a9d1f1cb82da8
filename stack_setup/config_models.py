# stack_setup/config_models.py
# -*- coding: utf-8 -*-
"""
Pydantic models for application configuration.

This module defines the structured settings for the bootstrapper,
including defaults, type annotations, and descriptions.
It utilizes Pydantic for data validation and settings management.
"""

from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Default Static Values (can be overridden by config file/env/cli) ---
PROJECT_DIR_DEFAULT: Path = Path(".")
CONTAINER_RUNTIME_COMMAND_DEFAULT: str = "docker"
HELPER_IMAGE_DEFAULT: str = "alpine:latest"
WARMUP_SECONDS_DEFAULT: int = 10
LOG_PREFIX_DEFAULT: str = "[STACK-SETUP]"

DB_CONNECTION_DEFAULT: str = "pgsql"
DB_HOST_DEFAULT: str = "postgres"
DB_PORT_DEFAULT: int = 5432
DB_DATABASE_DEFAULT: str = "laravel"
DB_USERNAME_DEFAULT: str = "laravel"
DB_PASSWORD_DEFAULT: str = "secret"

CACHE_HOST_DEFAULT: str = "redis"

SEARCH_HOST_DEFAULT: str = "elasticsearch"
SEARCH_PORT_DEFAULT: int = 9200
SCOUT_DRIVER_DEFAULT: str = "elasticsearch"

BACKEND_DIRECTORY_DEFAULT: str = "backend"
COMPOSER_IMAGE_DEFAULT: str = "composer:latest"
FRAMEWORK_PACKAGE_DEFAULT: str = "laravel/laravel"
APP_NAME_DEFAULT: str = "Smart Stock Management"

FRONTEND_DIRECTORY_DEFAULT: str = "frontend"
NODE_IMAGE_DEFAULT: str = "node:20-alpine"
VITE_TEMPLATE_DEFAULT: str = "react"
API_URL_DEFAULT: str = "http://localhost:8888/api/v1"

SYMBOLS_DEFAULT: Dict[str, str] = {
    "success": "✓",
    "error": "❌",
    "warning": "!",
    "info": "ℹ️",
    "step": "➡️",
    "gear": "⚙️",
    "package": "📦",
    "rocket": "🚀",
    "sparkles": "✨",
    "critical": "🔥",
    "debug": "🐛",
}


class DatabaseSettings(BaseSettings):
    """Relational database connection written into the backend .env."""
    model_config = SettingsConfigDict(
        env_prefix="STACK_DB_",
        extra="ignore"
    )

    connection: str = Field(default=DB_CONNECTION_DEFAULT, description="Framework database driver name.")
    host: str = Field(default=DB_HOST_DEFAULT, description="Database service hostname on the compose network.")
    port: int = Field(default=DB_PORT_DEFAULT, description="Database port.")
    database: str = Field(default=DB_DATABASE_DEFAULT, description="Database name.")
    username: str = Field(default=DB_USERNAME_DEFAULT, description="Database username.")
    password: str = Field(default=DB_PASSWORD_DEFAULT, description="Database password.")


class CacheSettings(BaseSettings):
    """Cache service settings."""
    model_config = SettingsConfigDict(
        env_prefix="STACK_CACHE_",
        extra="ignore"
    )

    host: str = Field(default=CACHE_HOST_DEFAULT, description="Cache service hostname on the compose network.")


class SearchSettings(BaseSettings):
    """Search engine settings appended to the backend .env."""
    model_config = SettingsConfigDict(
        env_prefix="STACK_SEARCH_",
        extra="ignore"
    )

    host: str = Field(default=SEARCH_HOST_DEFAULT, description="Search engine hostname on the compose network.")
    port: int = Field(default=SEARCH_PORT_DEFAULT, description="Search engine HTTP port.")
    scout_driver: str = Field(default=SCOUT_DRIVER_DEFAULT, description="Search integration driver name.")


class BackendSettings(BaseSettings):
    """Server-side project settings."""
    model_config = SettingsConfigDict(
        env_prefix="STACK_BACKEND_",
        extra="ignore"
    )

    directory: str = Field(default=BACKEND_DIRECTORY_DEFAULT, description="Backend project directory, relative to the project dir.")
    composer_image: str = Field(default=COMPOSER_IMAGE_DEFAULT, description="Package-manager image used to create the project.")
    framework_package: str = Field(default=FRAMEWORK_PACKAGE_DEFAULT, description="Framework skeleton package to create.")
    app_name: str = Field(default=APP_NAME_DEFAULT, description="Application name written into APP_NAME.")
    directory_mode: str = Field(default="755", description="Mode applied recursively to the backend directory.")
    writable_directories: List[str] = Field(
        default_factory=lambda: ["storage", "bootstrap/cache"],
        description="Backend subdirectories the web server must be able to write.",
    )
    writable_mode: str = Field(default="777", description="Mode applied recursively to the writable subdirectories.")
    service_name: str = Field(default="php", description="Compose service that runs the backend.")
    migrate_command: List[str] = Field(
        default_factory=lambda: ["php", "artisan", "migrate", "--force"],
        description="Schema migration command run inside the backend service.",
    )


class FrontendSettings(BaseSettings):
    """Client-side project settings."""
    model_config = SettingsConfigDict(
        env_prefix="STACK_FRONTEND_",
        extra="ignore"
    )

    directory: str = Field(default=FRONTEND_DIRECTORY_DEFAULT, description="Frontend project directory, relative to the project dir.")
    node_image: str = Field(default=NODE_IMAGE_DEFAULT, description="Node image used for scaffolding and npm.")
    template: str = Field(default=VITE_TEMPLATE_DEFAULT, description="Vite scaffolding template.")
    api_url: str = Field(default=API_URL_DEFAULT, description="API base URL written to the frontend .env.")
    dev_dependencies: List[str] = Field(
        default_factory=lambda: ["tailwindcss@^3", "postcss", "autoprefixer"],
        description="Packages installed with npm install -D.",
    )
    dependencies: List[str] = Field(
        default_factory=lambda: ["react-router-dom", "axios", "@tanstack/react-query"],
        description="Routing and data-fetching packages.",
    )


class SummarySettings(BaseModel):
    """
    Text printed once the stack is up.

    `{runtime}` in a command is replaced by the container runtime command.
    """

    endpoints: Dict[str, str] = Field(default_factory=lambda: {
        "Backend API": "http://localhost:8888/api",
        "Frontend (Dev)": "http://localhost:5173",
        "pgAdmin": "http://localhost:5050",
        "Kibana": "http://localhost:5601",
        "PostgreSQL": "localhost:5432",
        "Elasticsearch": "http://localhost:9200",
        "Redis": "localhost:6379",
    })
    credentials: Dict[str, str] = Field(default_factory=lambda: {
        "Database": "laravel / secret",
        "pgAdmin": "admin@admin.com / admin",
    })
    commands: Dict[str, str] = Field(default_factory=lambda: {
        "View logs": "{runtime} compose logs -f",
        "Stop services": "{runtime} compose down",
        "Enter PHP": "{runtime} compose exec php sh",
        "Enter Node": "{runtime} compose exec node sh",
    })
    note: str = Field(
        default="Frontend will be available at http://localhost:5173 once Node container starts",
    )


class AppSettings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_prefix="STACK_",
        extra="ignore"
    )

    project_dir: Path = Field(default=PROJECT_DIR_DEFAULT, description="Directory holding the compose file and both subprojects.")
    container_runtime_command: str = Field(default=CONTAINER_RUNTIME_COMMAND_DEFAULT,
                                           description="Command for the container runtime CLI (e.g., docker, podman).")
    helper_image: str = Field(default=HELPER_IMAGE_DEFAULT, description="Minimal shell image used to write files.")
    write_files_via_container: bool = Field(default=True,
                                            description="Write generated files through the helper image instead of the host.")
    warmup_seconds: int = Field(default=WARMUP_SECONDS_DEFAULT, ge=0,
                                description="Fixed wait between starting containers and migrating.")
    log_prefix: str = Field(default=LOG_PREFIX_DEFAULT, description="Prefix for log messages.")

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    backend: BackendSettings = Field(default_factory=BackendSettings)
    frontend: FrontendSettings = Field(default_factory=FrontendSettings)
    summary: SummarySettings = Field(default_factory=SummarySettings)

    symbols: Dict[str, str] = Field(default_factory=lambda: dict(SYMBOLS_DEFAULT))

    @property
    def backend_path(self) -> Path:
        return self.project_dir / self.backend.directory

    @property
    def frontend_path(self) -> Path:
        return self.project_dir / self.frontend.directory
