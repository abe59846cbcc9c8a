"""Tests for the pkgbuild command."""

from click.testing import CliRunner

from seekaur.cli.cli import cli
from seekaur.core.aur.fake import FakeAur
from seekaur.core.aur.types import TextResponse
from seekaur.core.context import SeekaurContext

FOO_URL = "https://aur.archlinux.org/packages/fo/foo/PKGBUILD"
NOPE_URL = "https://aur.archlinux.org/packages/no/nope/PKGBUILD"
NOT_FOUND_PAGE = "<h1>404 - Page Not Found</h1>"


def _aur() -> FakeAur:
    return FakeAur(
        texts={
            FOO_URL: TextResponse(url=FOO_URL, status_code=200, text="pkgname=foo\npkgver=1.0"),
            NOPE_URL: TextResponse(url=NOPE_URL, status_code=404, text=NOT_FOUND_PAGE),
        }
    )


def test_pkgbuild_prints_body_per_name() -> None:
    # Arrange
    aur = _aur()
    runner = CliRunner()

    # Act
    result = runner.invoke(cli, ["pkgbuild", "foo"], obj=SeekaurContext.for_test(aur=aur))

    # Assert
    assert result.exit_code == 0
    assert result.output == "pkgname=foo\npkgver=1.0\n"
    assert aur.text_calls == [FOO_URL]


def test_pkgbuild_prints_error_page_verbatim_by_default() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["pkgbuild", "nope", "foo"], obj=SeekaurContext.for_test(aur=_aur())
    )

    assert result.exit_code == 0
    assert result.output == f"{NOT_FOUND_PAGE}\npkgname=foo\npkgver=1.0\n"


def test_pkgbuild_strict_fails_on_http_error() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["pkgbuild", "--strict", "nope", "foo"], obj=SeekaurContext.for_test(aur=_aur())
    )

    assert result.exit_code == 1
    assert "HTTP 404" in result.output
    assert NOT_FOUND_PAGE not in result.output
    assert "pkgname=foo" not in result.output


def test_pkgbuild_network_error_stops() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["pkgbuild", "foo"], obj=SeekaurContext.for_test(aur=FakeAur(unreachable=True))
    )

    assert result.exit_code == 1
    assert "Error: " in result.output


def test_pkgbuild_requires_an_argument() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["pkgbuild"], obj=SeekaurContext.for_test())

    assert result.exit_code == 1
    assert "pkgbuild requires at least one argument" in result.output
