"""Tests for the static knowledge loader."""

from medguide.knowledge.loader import KnowledgeBase, load_knowledge


def test_load_knowledge_reads_whole_file(tmp_path):
    path = tmp_path / "medical_data.txt"
    path.write_text("Diabetes causes high blood sugar.\nAsthma narrows airways.", encoding="utf-8")

    knowledge = load_knowledge(path)

    assert knowledge.is_loaded
    assert knowledge.text == "Diabetes causes high blood sugar.\nAsthma narrows airways."
    assert knowledge.source == str(path)


def test_load_knowledge_missing_file_returns_empty(tmp_path):
    knowledge = load_knowledge(tmp_path / "absent.txt")

    assert knowledge.text == ""
    assert knowledge.is_loaded is False


def test_load_knowledge_directory_path_returns_empty(tmp_path):
    knowledge = load_knowledge(tmp_path)

    assert knowledge == KnowledgeBase(text="", source=str(tmp_path))
