"""Unit tests for GitmodulesRenderer."""

from create_next_elysia.domain.gitmodules import GitmodulesRenderer


def test_render_writes_two_tab_indented_stanzas() -> None:
    content = GitmodulesRenderer.render(
        "https://example.com/me/backend.git",
        "https://example.com/me/frontend.git",
    )

    assert content == (
        '[submodule "back-end/app"]\n'
        "\tpath = back-end/app\n"
        "\turl = https://example.com/me/backend.git\n"
        '[submodule "front-end/my-app"]\n'
        "\tpath = front-end/my-app\n"
        "\turl = https://example.com/me/frontend.git\n"
    )


def test_render_honours_custom_paths() -> None:
    content = GitmodulesRenderer.render("b", "f", backend_path="api", frontend_path="web")
    assert '[submodule "api"]\n\tpath = api\n\turl = b\n' in content
    assert '[submodule "web"]\n\tpath = web\n\turl = f\n' in content
    assert content.count("[submodule") == 2
