"""Tests for the tarball command."""

from click.testing import CliRunner

from seekaur.cli.cli import cli
from seekaur.core.aur.fake import FakeAur
from seekaur.core.context import SeekaurContext
from tests.test_utils.packages import make_package, make_response


def test_tarball_prints_templated_links_without_network() -> None:
    # Arrange
    aur = FakeAur()
    runner = CliRunner()

    # Act
    result = runner.invoke(cli, ["tarball", "foo", "a"], obj=SeekaurContext.for_test(aur=aur))

    # Assert
    assert result.exit_code == 0
    assert result.output == (
        "https://aur.archlinux.org/packages/fo/foo/foo.tar.gz\n"
        "https://aur.archlinux.org/packages/a/a/a.tar.gz\n"
    )
    assert aur.rpc_calls == []
    assert aur.text_calls == []


def test_tarball_requires_an_argument() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["tarball"], obj=SeekaurContext.for_test())

    assert result.exit_code == 1
    assert "tarball requires at least one argument" in result.output


def test_tarball_rejects_empty_name() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["tarball", ""], obj=SeekaurContext.for_test())

    assert result.exit_code == 1
    assert "package names cannot be empty" in result.output


def test_tarball_verify_uses_reported_url_path() -> None:
    # Arrange
    package = make_package("foo")
    aur = FakeAur(
        rpc_responses={
            "/rpc.php?type=multiinfo&arg[]=foo&arg[]=gone": make_response("multiinfo", [package])
        }
    )
    runner = CliRunner()

    # Act
    result = runner.invoke(
        cli, ["tarball", "--verify", "foo", "gone"], obj=SeekaurContext.for_test(aur=aur)
    )

    # Assert
    assert result.exit_code == 1
    assert "https://aur.archlinux.org/packages/fo/foo/foo.tar.gz\n" in result.output
    assert "error: package 'gone' was not found" in result.output


def test_tarball_verify_rejects_repeated_names() -> None:
    aur = FakeAur()
    runner = CliRunner()

    result = runner.invoke(
        cli, ["tarball", "--verify", "foo", "bar", "foo"], obj=SeekaurContext.for_test(aur=aur)
    )

    assert result.exit_code == 1
    assert "tarball: package names given more than once: foo" in result.output
    assert aur.rpc_calls == []
