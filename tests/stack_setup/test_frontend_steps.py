from stack_setup import config as static_config
from stack_setup.config_models import AppSettings
from stack_setup.steps.frontend import (
    FrontendConfigStep,
    FrontendDependenciesStep,
    FrontendProjectStep,
    TailwindInitStep,
    frontend_files,
    render_frontend_env,
)


def test_frontend_env_contains_exactly_the_api_url(app_settings):
    assert render_frontend_env(app_settings) == (
        "VITE_API_URL=http://localhost:8888/api/v1\n"
    )


def test_frontend_env_uses_configured_api_url(tmp_path):
    settings = AppSettings(
        project_dir=tmp_path, frontend={"api_url": "https://api.example.test/v2"}
    )
    assert render_frontend_env(settings) == "VITE_API_URL=https://api.example.test/v2\n"


def test_frontend_files(app_settings):
    files = frontend_files(app_settings)
    assert list(files) == [".env", "tailwind.config.js", "src/index.css"]
    assert "'#3b82f6'" in files["tailwind.config.js"]
    assert files["src/index.css"] == static_config.INDEX_CSS_TEMPLATE


class TestFrontendProjectStep:

    def test_scaffolds_when_missing(self, mocker, app_settings, tmp_path):
        run_mock = mocker.patch("stack_setup.steps.frontend.run_shell_in_container")
        step = FrontendProjectStep(app_settings)

        assert step.skip_reason() is None
        step.run()

        args = run_mock.call_args.args
        assert args[1] == "node:20-alpine"
        assert args[2] == tmp_path
        assert args[3] == [[
            "npm", "create", "vite@latest", "frontend", "--", "--template", "react"
        ]]

    def test_skips_existing_directory(self, app_settings, tmp_path):
        (tmp_path / "frontend").mkdir()
        assert FrontendProjectStep(app_settings).skip_reason() == (
            "Frontend directory already exists"
        )


class TestFrontendDependenciesStep:

    def test_skips_without_frontend(self, app_settings):
        assert FrontendDependenciesStep(app_settings).skip_reason() == (
            "Frontend directory not found"
        )

    def test_installs_in_one_container(self, mocker, app_settings, tmp_path):
        (tmp_path / "frontend").mkdir()
        run_mock = mocker.patch("stack_setup.steps.frontend.run_shell_in_container")

        FrontendDependenciesStep(app_settings).run()

        run_mock.assert_called_once()
        args = run_mock.call_args.args
        assert args[2] == tmp_path / "frontend"
        assert args[3] == [
            ["npm", "install"],
            ["npm", "install", "-D", "tailwindcss@^3", "postcss", "autoprefixer"],
            ["npm", "install", "react-router-dom", "axios", "@tanstack/react-query"],
        ]

    def test_empty_package_lists_only_run_npm_install(self, mocker, tmp_path):
        (tmp_path / "frontend").mkdir()
        settings = AppSettings(
            project_dir=tmp_path,
            frontend={"dev_dependencies": [], "dependencies": []},
        )
        run_mock = mocker.patch("stack_setup.steps.frontend.run_shell_in_container")

        FrontendDependenciesStep(settings).run()

        assert run_mock.call_args.args[3] == [["npm", "install"]]


def test_tailwind_init(mocker, app_settings, tmp_path):
    (tmp_path / "frontend").mkdir()
    run_mock = mocker.patch("stack_setup.steps.frontend.run_shell_in_container")

    step = TailwindInitStep(app_settings)
    assert step.skip_reason() is None
    step.run()

    assert run_mock.call_args.args[3] == [["npx", "tailwindcss", "init", "-p"]]


class TestFrontendConfigStep:

    def test_never_skips(self, app_settings):
        assert FrontendConfigStep(app_settings).skip_reason() is None

    def test_overwrites_files_on_host(self, host_write_settings, tmp_path):
        frontend = tmp_path / "frontend"
        (frontend / "src").mkdir(parents=True)
        (frontend / ".env").write_text("VITE_API_URL=http://old\nEXTRA=1\n")
        (frontend / "tailwind.config.js").write_text("export default {}\n")

        FrontendConfigStep(host_write_settings).run()

        assert (frontend / ".env").read_text() == (
            "VITE_API_URL=http://localhost:8888/api/v1\n"
        )
        assert (frontend / "tailwind.config.js").read_text() == (
            static_config.TAILWIND_CONFIG_TEMPLATE
        )
        assert (frontend / "src" / "index.css").read_text() == (
            "@tailwind base;\n@tailwind components;\n@tailwind utilities;\n"
        )

    def test_writes_through_helper_image(self, mocker, app_settings, tmp_path):
        write_mock = mocker.patch("stack_setup.steps.frontend.write_file_via_container")

        FrontendConfigStep(app_settings).run()

        written = [call.args[2] for call in write_mock.call_args_list]
        assert written == [".env", "tailwind.config.js", "src/index.css"]
        assert all(call.args[1] == tmp_path / "frontend" for call in write_mock.call_args_list)
