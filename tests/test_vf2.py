import pytest

from vf2_matching import vf2 as vf2_module
from vf2_matching.loader import read_graphs
from vf2_matching.vf2 import VF2
from vf2_matching.state import MatchMode

DATABASE = """t # 0
v 0 A
v 1 A
v 2 A
e 0 1 x
e 1 2 x
e 2 0 x
t # 1
v 0 A
v 1 A
v 2 A
v 3 B
e 0 1 x
e 1 2 x
e 2 0 x
t # 2
v 0 A
v 1 B
e 0 1 x
t # -1
"""

QUERIES = """t # 0
v 0 A
v 1 A
v 2 A
e 2 1 x
e 1 0 x
e 0 2 x
t # 1
v 0 B
v 1 A
e 1 0 x
t # -1
"""


@pytest.fixture
def files(tmp_path):
    database = tmp_path / 'db.data'
    database.write_text(DATABASE)
    queries = tmp_path / 'q.my'
    queries.write_text(QUERIES)
    return str(database), str(queries)


def test_isomorphism_batch(files):
    database, queries = files
    vf2 = VF2(database, queries, mode='iso', where=True).run()
    assert len(vf2.database) == 3
    df = vf2.report_df
    assert list(df['query_gid']) == [0, 1]
    assert list(df['num_matched']) == [1, 1]
    assert list(df['where']) == [[0], [2]]
    assert list(df['num_vert']) == [3, 2]
    assert list(df['num_edge']) == [3, 1]


def test_subgraph_batch(files):
    database, queries = files
    vf2 = VF2(database, [queries], mode=MatchMode.SUBGRAPH, where=True).run()
    assert list(vf2.report_df['where']) == [[0, 1], [2]]


def test_limits(files):
    database, queries = files
    vf2 = VF2(database, queries, max_ngraphs=1, max_nqueries=1).run()
    assert len(vf2.database) == 1
    assert list(vf2.report_df['num_matched']) == [1]
    assert 'where' not in vf2.report_df.columns


def test_budget_counts_as_no_match(files):
    database, queries = files
    vf2 = VF2(database, queries, max_states=1).run()
    assert list(vf2.report_df['num_matched']) == [0, 0]


def test_workers(files):
    database, queries = files
    vf2 = VF2(database, queries, mode='subiso', n_workers=2, where=True).run()
    assert list(vf2.report_df['where']) == [[0, 1], [2]]


def test_worker_jobs_carry_only_the_query(files, monkeypatch):
    database, queries = files
    monkeypatch.setattr(vf2_module, '_database', list())
    vf2_module._init_worker(read_graphs(database))
    query = read_graphs(queries)[1]
    where, _ = vf2_module._match_query((query, MatchMode.EXACT, None))
    assert where == [2]


def test_time_stats(files, capsys):
    database, queries = files
    vf2 = VF2(database, queries).run()
    assert vf2.time_stats() is vf2
    out = capsys.readouterr().out
    assert 'Read:' in out and 'Match:' in out and 'Total:' in out


def test_verbose_report(files, capsys):
    database, queries = files
    VF2(database, queries, verbose=True, where=True).run()
    out = capsys.readouterr().out
    assert 't # 1' in out
    assert 'Matched: 1' in out
    assert 'where: [2]' in out


def test_empty_report_has_columns():
    vf2 = VF2('db', ['q'], where=True)
    assert list(vf2.report_df.columns) == [
        'query_file', 'query_gid', 'num_vert', 'num_edge', 'num_matched',
        'seconds', 'where']
