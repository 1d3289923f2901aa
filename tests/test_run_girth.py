import json
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'scripts')))

from run_girth import load_graph, main


def write_config(tmp_path, cfg):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(cfg))
    return str(path)


def test_load_graph_from_edges():
    G = load_graph({"edges": [[0, 1], [1, 2, 2.0], [2, 0]]})
    assert G.num_vertices == 3
    assert G.num_edges == 3


def test_load_graph_from_edgelist(tmp_path):
    (tmp_path / "g.txt").write_text("a b 1.0\nb c 2.0\nc a 1.5\n")
    G = load_graph({"edgelist": "g.txt"}, base_dir=str(tmp_path))
    assert sorted(e.weight for e in G.edges()) == [1.0, 1.5, 2.0]


def test_load_unweighted_edgelist(tmp_path):
    (tmp_path / "g.txt").write_text("a b\nb c\n")
    G = load_graph({"edgelist": "g.txt"}, base_dir=str(tmp_path))
    assert G.num_edges == 2


def test_main_reports_girth(tmp_path, capsys):
    path = write_config(tmp_path, {"girth": {"graph": {"generator": "petersen"}, "algo": {"exact": True}}})
    assert main(["--config", path, "--json"]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["length"] == 5
    assert len(report["vertices"]) == 5


def test_main_acyclic(tmp_path, capsys):
    path = write_config(tmp_path, {"graph": {"generator": "path", "n": 4}})
    assert main(["--config", path]) == 0
    assert "acyclic" in capsys.readouterr().out


def test_main_invalid_graph(tmp_path, capsys):
    path = write_config(tmp_path, {"graph": {"edges": [[0, 1, -2]]}})
    assert main(["--config", path]) == 2
    assert "error" in capsys.readouterr().err


def test_main_unknown_algo_setting(tmp_path, capsys):
    path = write_config(tmp_path, {"graph": {"generator": "cycle", "n": 4}, "algo": {"fast": True}})
    assert main(["--config", path]) == 2
    assert "algo" in capsys.readouterr().err


def test_main_missing_graph_section(tmp_path, capsys):
    path = write_config(tmp_path, {"girth": {"algo": {"exact": True}}})
    assert main(["--config", path]) == 2
    assert "graph" in capsys.readouterr().err


def test_script_has_docstring():
    import run_girth

    assert run_girth.__doc__.startswith("Report the girth")
