import os
import tempfile
import unittest
from pathlib import Path

from wiex.infra.environment import EnvironmentContext, derive_environment, read_dotenv


class TestEnvironmentContext(unittest.TestCase):
    def test_child_environment_appends_extra(self) -> None:
        ctx = EnvironmentContext(
            search_path_extra="/mnt/c/Users/alice/.cargo/bin",
            inherited_path="/usr/bin",
            full_environment={"PATH": "/usr/bin", "HOME": "/home/alice"},
        )
        env = ctx.child_environment()
        self.assertEqual(env["PATH"], f"/usr/bin{os.pathsep}/mnt/c/Users/alice/.cargo/bin")
        self.assertEqual(env["HOME"], "/home/alice")
        self.assertEqual(ctx.full_environment["PATH"], "/usr/bin")

    def test_no_dedup_and_no_validation(self) -> None:
        ctx = EnvironmentContext(search_path_extra="/usr/bin", inherited_path="/usr/bin", full_environment={})
        self.assertEqual(ctx.child_environment()["PATH"], f"/usr/bin{os.pathsep}/usr/bin")

    def test_missing_extra_still_joins(self) -> None:
        ctx = EnvironmentContext(search_path_extra=None, inherited_path="/usr/bin", full_environment={})
        self.assertEqual(ctx.child_environment()["PATH"], f"/usr/bin{os.pathsep}")

    def test_each_call_is_fresh(self) -> None:
        ctx = EnvironmentContext(search_path_extra="/x", inherited_path="/usr/bin", full_environment={"PATH": "/usr/bin"})
        first = ctx.child_environment()
        second = ctx.child_environment()
        self.assertEqual(first, second)
        self.assertIsNot(first, second)


class TestDeriveEnvironment(unittest.TestCase):
    def test_reads_given_environ(self) -> None:
        ctx = derive_environment("WIEX_PATH", environ={"PATH": "/bin", "WIEX_PATH": "/mnt/c/bin"})
        self.assertEqual(ctx.search_path_extra, "/mnt/c/bin")
        self.assertEqual(ctx.inherited_path, "/bin")

    def test_custom_variable_name(self) -> None:
        ctx = derive_environment("EXTRA_PATH", environ={"PATH": "/bin", "EXTRA_PATH": "/opt/bin"})
        self.assertEqual(ctx.search_path_extra, "/opt/bin")

    def test_dotenv_supplies_only_the_path_variable(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / ".env"
            p.write_text(
                'WIEX_PATH="/mnt/c/from/dotenv"\nPATH=/should/not/win\nUNRELATED_SECRET=leaked\n',
                encoding="utf-8",
            )
            before = dict(os.environ)

            ctx = derive_environment("WIEX_PATH", environ={"PATH": "/bin"}, dotenv_path=p)

            self.assertEqual(ctx.search_path_extra, "/mnt/c/from/dotenv")
            self.assertEqual(ctx.inherited_path, "/bin")
            self.assertEqual(dict(ctx.full_environment), {"PATH": "/bin"})
            self.assertEqual(ctx.child_environment(), {"PATH": f"/bin{os.pathsep}/mnt/c/from/dotenv"})
            self.assertEqual(dict(os.environ), before)

    def test_host_value_wins_over_dotenv(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / ".env"
            p.write_text("WIEX_PATH=/from/dotenv\n", encoding="utf-8")
            ctx = derive_environment("WIEX_PATH", environ={"PATH": "/bin", "WIEX_PATH": "/from/host"}, dotenv_path=p)
        self.assertEqual(ctx.search_path_extra, "/from/host")

    def test_missing_dotenv_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            self.assertEqual(read_dotenv(Path(td) / ".env"), {})


if __name__ == "__main__":
    unittest.main()
