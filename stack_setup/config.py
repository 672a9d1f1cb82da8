# stack_setup/config.py
"""
Static constants and file templates for the stack setup.

Values here are not user-configurable; anything a user may want to change
lives in config_models.AppSettings.
"""

SCRIPT_VERSION: str = "1.0.0"
PROJECT_TITLE: str = "Smart Stock Management"

# Mount point used for every throwaway container.
CONTAINER_WORKDIR: str = "/app"

BACKEND_ENV_FILE: str = ".env"
FRONTEND_ENV_FILE: str = ".env"
TAILWIND_CONFIG_FILE: str = "tailwind.config.js"
INDEX_CSS_FILE: str = "src/index.css"

SEARCH_ENV_HEADER: str = "# Elasticsearch Configuration"

TAILWIND_CONFIG_TEMPLATE: str = """\
/** @type {import('tailwindcss').Config} */
export default {
  content: [
    "./index.html",
    "./src/**/*.{js,ts,jsx,tsx}",
  ],
  theme: {
    extend: {
      colors: {
        primary: {
          50: '#eff6ff',
          100: '#dbeafe',
          200: '#bfdbfe',
          300: '#93c5fd',
          400: '#60a5fa',
          500: '#3b82f6',
          600: '#2563eb',
          700: '#1d4ed8',
          800: '#1e40af',
          900: '#1e3a8a',
        },
      },
    },
  },
  plugins: [],
}
"""

INDEX_CSS_TEMPLATE: str = """\
@tailwind base;
@tailwind components;
@tailwind utilities;
"""

# Timeout for the informational endpoint check; never used before migrating.
HEALTH_CHECK_TIMEOUT_SECONDS: int = 5
