import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from pipeline.config import BenchSettings, settings_from_env
from pipeline.wiring import build_pipeline, load_env
from tools.builder import DEFAULT_BUILD_COMMAND


class TestSettingsFromEnv(unittest.TestCase):
    def test_defaults(self) -> None:
        s = settings_from_env({})
        self.assertEqual(BenchSettings(), s)
        self.assertEqual(Path("output"), s.output_dir)
        self.assertEqual(DEFAULT_BUILD_COMMAND, s.build_command)

    def test_reads_environment(self) -> None:
        s = settings_from_env(
            {
                "CSS_BENCH_OUTPUT_DIR": "/tmp/out",
                "CSS_BENCH_BUILD_COMMAND": "tailwindcss -i {css} -c {config} -o {output} --minify",
                "CSS_BENCH_NODE_MODULES": "/srv/node_modules",
                "CSS_BENCH_TIMEOUT": "90",
                "CSS_BENCH_MAX_CONCURRENCY": "4",
            }
        )
        self.assertEqual(Path("/tmp/out"), s.output_dir)
        self.assertEqual("--minify", s.build_command[-1])
        self.assertEqual(Path("/srv/node_modules"), s.node_modules)
        self.assertEqual(90.0, s.timeout_seconds)
        self.assertEqual(4, s.max_concurrency)

    def test_invalid_numbers_name_the_variable(self) -> None:
        with self.assertRaises(ValueError) as ctx:
            settings_from_env({"CSS_BENCH_TIMEOUT": "soon"})
        self.assertIn("CSS_BENCH_TIMEOUT", str(ctx.exception))
        with self.assertRaises(ValueError):
            settings_from_env({"CSS_BENCH_MAX_CONCURRENCY": "-1"})


class TestWiring(unittest.TestCase):
    def test_dotenv_does_not_override_existing_vars(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            env_file = Path(td) / ".env"
            env_file.write_text("CSS_BENCH_OUTPUT_DIR=from-dotenv\nCSS_BENCH_TIMEOUT=5\n", encoding="utf-8")

            with mock.patch.dict(os.environ, {"CSS_BENCH_OUTPUT_DIR": "from-shell"}, clear=False):
                os.environ.pop("CSS_BENCH_TIMEOUT", None)
                load_env(env_file)
                self.assertEqual("from-shell", os.environ["CSS_BENCH_OUTPUT_DIR"])
                self.assertEqual("5", os.environ["CSS_BENCH_TIMEOUT"])

    def test_build_pipeline_without_dotenv_reads_environment(self) -> None:
        with mock.patch.dict(os.environ, {"CSS_BENCH_OUTPUT_DIR": "env-out"}, clear=False):
            pipeline = build_pipeline(use_dotenv=False)
        self.assertEqual(Path("env-out"), pipeline.settings.output_dir)

    def test_build_pipeline_with_explicit_settings(self) -> None:
        settings = BenchSettings(output_dir=Path("x"))
        self.assertIs(settings, build_pipeline(settings).settings)


if __name__ == "__main__":
    unittest.main()
