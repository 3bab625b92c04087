import copy
import json

import pytest

import app as app_module
from app import DEFAULT_CONFIG, TextProcessor, load_config, merge_config, preprocess_text

FILLER = " ".join(["filler"] * 20)


def test_merge_config_does_not_mutate_defaults():
    before = copy.deepcopy(DEFAULT_CONFIG)
    merged = merge_config(DEFAULT_CONFIG, {"TextAnalyzer": {"top_n_keywords_count": 3}, "Extra": 1})
    assert merged["TextAnalyzer"]["top_n_keywords_count"] == 3
    assert merged["TextAnalyzer"]["min_keyword_frequency"] == 2
    assert merged["Extra"] == 1
    assert DEFAULT_CONFIG == before


def test_load_config_from_file(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"HighlightDetector": {"complex_sentence_words": 10}}))
    config = load_config(str(path))
    assert config["HighlightDetector"]["complex_sentence_words"] == 10
    assert "Loaded custom configuration" in capsys.readouterr().out


def test_load_config_falls_back_to_defaults(tmp_path, capsys):
    assert load_config(str(tmp_path / "missing.json")) == DEFAULT_CONFIG
    assert "not found" in capsys.readouterr().out
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    assert load_config(str(bad)) == DEFAULT_CONFIG


def test_preprocess_text():
    assert preprocess_text("<p>hello   there</p>", strip=True, tidy=True, case_type="upper") == "HELLO THERE"
    assert preprocess_text("as is") == "as is"


def test_run_analysis_report():
    processor = TextProcessor()
    report = processor.run_analysis("SEO SEO SEO optimization optimization keyword " + FILLER)
    attributes = report["text_attributes"]
    assert attributes["TextAnalyzer"]["words"] == 26
    assert attributes["SEOScoreBreakdown"]["score"] == attributes["TextAnalyzer"]["seoScore"]
    highlights = attributes["HighlightDetector"]["highlights"]
    assert {h["type"] for h in highlights} == {"keyword"}
    assert "<mark" in attributes["HighlightDetector"]["highlightedMarkup"]


def test_run_analysis_with_explicit_keywords():
    report = TextProcessor().run_analysis("Cats and dogs. Cats again.", critical_keywords=["dogs"])
    [highlight] = report["text_attributes"]["HighlightDetector"]["highlights"]
    assert highlight["text"] == "dogs"


def test_input_length_is_capped():
    config = merge_config(DEFAULT_CONFIG, {"Global": {"max_input_chars": 5}})
    processor = TextProcessor(config=config)
    with pytest.raises(ValueError):
        processor.run_analysis("too long for the limit")
    assert processor.analyze_text("short").words == 1


def test_save_report_to_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    processor = TextProcessor(output_format="json")
    processor.run_analysis("The cat sat on the mat.")
    filename = processor.save_report_to_file()
    with open(tmp_path / filename) as f:
        saved = json.load(f)
    assert saved["text_attributes"]["TextAnalyzer"]["words"] == 6


def test_save_text_report(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    processor = TextProcessor(output_format="txt")
    processor.run_analysis("The cat sat on the mat.")
    content = (tmp_path / processor.save_report_to_file()).read_text()
    assert "Words: 6" in content


def test_analyze_endpoint(client):
    response = client.post("/analyze", json={"text": "The cat sat on the mat."})
    assert response.status_code == 200
    data = response.get_json()
    assert data["words"] == 6
    assert data["fleschScore"] > 60
    assert "issues" in data["seoBreakdown"]


def test_analyze_endpoint_empty_text(client):
    response = client.post("/analyze", json={"text": ""})
    assert response.status_code == 200
    assert response.get_json()["readingTime"] == "0"


@pytest.mark.parametrize("payload", [{}, {"text": 42}])
def test_analyze_endpoint_rejects_bad_payload(client, payload):
    assert client.post("/analyze", json=payload).status_code == 400


def test_analyze_endpoint_rejects_non_json(client):
    response = client.post("/analyze", data="text", content_type="text/plain")
    assert response.status_code == 400


def test_analyze_endpoint_rejects_oversized_text(client, monkeypatch):
    config = merge_config(DEFAULT_CONFIG, {"Global": {"max_input_chars": 10}})
    monkeypatch.setattr(app_module, "flask_app_config", config)
    response = client.post("/analyze", json={"text": "x" * 11})
    assert response.status_code == 413


def test_highlights_endpoint(client):
    response = client.post("/highlights", json={"text": "SEO is great. I love seo.", "keywords": "seo"})
    assert response.status_code == 200
    data = response.get_json()
    assert [h["text"] for h in data["highlights"]] == ["SEO", "seo"]
    assert data["markup"].count("<mark") == 2


def test_highlights_endpoint_rejects_bad_keywords(client):
    response = client.post("/highlights", json={"text": "x", "keywords": 5})
    assert response.status_code == 400


@pytest.mark.parametrize("keywords", [[1, None], ["seo", 2], [["seo"]]])
def test_highlights_endpoint_rejects_non_string_keywords(client, keywords):
    response = client.post("/highlights", json={"text": "seo seo seo", "keywords": keywords})
    assert response.status_code == 400
    assert "error" in response.get_json()


def test_highlights_endpoint_defaults_to_critical_keywords(client):
    response = client.post("/highlights", json={"text": "SEO SEO SEO optimization optimization keyword " + FILLER})
    assert response.status_code == 200
    assert {h["type"] for h in response.get_json()["highlights"]} == {"keyword"}


def test_api_requests_share_one_analyzer(client):
    client.post("/analyze", json={"text": "Readability matters a lot."})
    processor = app_module.get_api_processor()
    counter = processor.analyzer.syllable_counter
    misses, hits = counter.misses, counter.hits

    response = client.post("/analyze", json={"text": "Readability matters a lot."})
    assert response.status_code == 200
    assert app_module.get_api_processor() is processor
    assert counter.misses == misses
    assert counter.hits > hits


def test_api_processor_follows_config_changes(client, monkeypatch):
    first = app_module.get_api_processor()
    config = merge_config(DEFAULT_CONFIG, {"HighlightDetector": {"complex_sentence_words": 5}})
    monkeypatch.setattr(app_module, "flask_app_config", config)
    second = app_module.get_api_processor()
    assert second is not first
    assert second.detector.complex_sentence_words == 5


def test_format_endpoint(client):
    response = client.post("/format", json={"text": "<p>hi</p>"})
    assert response.get_json() == {"text": "hi", "mode": "strip"}
    response = client.post("/format", json={"text": "hi there", "mode": "title"})
    assert response.get_json()["text"] == "Hi There"
    assert client.post("/format", json={"text": "x", "mode": "shout"}).status_code == 400


def test_formatting_endpoint(client):
    response = client.post("/formatting", json={"html": "<b>bold</b>"})
    data = response.get_json()
    assert data["formatting"]["styles"] == ["Bold"]
    assert data["display"][0]["label"] == "Styles"
    plain = client.post("/formatting", json={"html": "plain"}).get_json()
    assert plain == {"formatting": None, "display": None}
