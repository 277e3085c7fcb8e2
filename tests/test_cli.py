import json

from social_share.cli import main


def test_cli_prints_generated_posts(capsys):
    exit_code = main(
        [
            "--text",
            "AI helps teams ship faster. Our new tool cuts review time by half. Try it today!",
            "--tone",
            "enthusiastic",
            "--cta",
            "learnMore",
            "--hashtags",
            "Product Marketing, #SaaS!",
        ]
    )
    output = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert output["estimatedReadingTime"] == "1 min read"
    assert output["hashtags"][:2] == ["#ProductMarketing", "#SaaS"]
    assert all("Learn more" in post["copy"] for post in output["posts"])


def test_cli_reads_text_file(tmp_path, capsys):
    article = tmp_path / "post.txt"
    article.write_text("Release notes for our scheduler.\n\nIt now supports time zones.", encoding="utf-8")

    assert main(["--text-file", str(article), "--title", "Scheduler update"]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["title"] == "Scheduler update"
    assert output["summary"] == "Release notes for our scheduler. It now supports time zones."


def test_cli_without_source_fails(capsys):
    assert main([]) == 1
    assert "Provide a blog URL" in capsys.readouterr().out
