"""Batch matching of query graphs against a graph database."""
import collections
import functools
import logging
import multiprocessing
import time

import pandas as pd

from .loader import read_graphs
from .matching import match
from .search import SearchBudgetExceeded
from .state import MatchMode

logger = logging.getLogger(__name__)


def record_timestamp(func):
    """Record timestamp before and after call of `func`."""
    @functools.wraps(func)
    def deco(self, *args, **kwargs):
        self.timestamps[func.__name__ + '_in'] = time.time()
        result = func(self, *args, **kwargs)
        self.timestamps[func.__name__ + '_out'] = time.time()
        return result
    return deco


# Database shared by the worker processes, set once by _init_worker.
_database = list()


def _init_worker(database):
    global _database
    _database = database


def _match_database(query, database, mode, max_states):
    """Match one query graph against the whole database."""
    start = time.time()
    where = list()
    for g in database:
        try:
            if match(query, g, mode, max_states) is not None:
                where.append(g.gid)
        except SearchBudgetExceeded:
            logger.warning('query %s vs graph %s: gave up after %d states',
                           query.gid, g.gid, max_states)
    return where, time.time() - start


def _match_query(job):
    query, mode, max_states = job
    return _match_database(query, _database, mode, max_states)


class VF2(object):
    """Run every query graph against every database graph."""

    def __init__(self,
                 database_file_name,
                 query_file_names,
                 mode=MatchMode.EXACT,
                 max_ngraphs=float('inf'),
                 max_nqueries=float('inf'),
                 max_states=None,
                 n_workers=1,
                 verbose=False,
                 where=False):
        """Initialize VF2 instance."""
        self._database_file_name = database_file_name
        if isinstance(query_file_names, str):
            query_file_names = [query_file_names]
        self._query_file_names = list(query_file_names)
        self._mode = MatchMode(mode)
        self._max_ngraphs = max_ngraphs
        self._max_nqueries = max_nqueries
        self._max_states = max_states
        self._n_workers = max(1, n_workers)
        self._verbose = verbose
        self._where = where
        self.database = list()
        self.queries = collections.OrderedDict()
        self.timestamps = dict()
        self.report_df = pd.DataFrame(columns=self._columns())

    def time_stats(self):
        """Print stats of time."""
        func_names = ['_read_graphs', 'run']
        time_deltas = collections.defaultdict(float)
        for fn in func_names:
            time_deltas[fn] = round(
                self.timestamps[fn + '_out'] - self.timestamps[fn + '_in'],
                2
            )

        print('Read:\t{} s'.format(time_deltas['_read_graphs']))
        print('Match:\t{} s'.format(
            round(time_deltas['run'] - time_deltas['_read_graphs'], 2)))
        print('Total:\t{} s'.format(time_deltas['run']))

        return self

    @record_timestamp
    def _read_graphs(self):
        self.database = read_graphs(self._database_file_name,
                                    self._max_ngraphs)
        logger.info('Database size: %d', len(self.database))
        self.queries = collections.OrderedDict()
        for file_name in self._query_file_names:
            self.queries[file_name] = read_graphs(file_name,
                                                  self._max_nqueries)
            logger.info('Read %d queries from %s',
                        len(self.queries[file_name]), file_name)
        return self

    @record_timestamp
    def run(self):
        """Run the matching of all queries."""
        self._read_graphs()
        pool = None
        if self._n_workers > 1:
            pool = multiprocessing.Pool(self._n_workers,
                                        initializer=_init_worker,
                                        initargs=(self.database,))
        rows = list()
        try:
            for file_name, queries in self.queries.items():
                start = time.time()
                if pool is not None:
                    jobs = [(q, self._mode, self._max_states) for q in queries]
                    results = pool.map(_match_query, jobs)
                else:
                    results = [_match_database(q, self.database, self._mode,
                                               self._max_states)
                               for q in queries]
                for q, (where, seconds) in zip(queries, results):
                    rows.append(self._report(file_name, q, where, seconds))
                logger.info('%s: %d queries, %d matches, %.2f s', file_name,
                            len(queries), sum(len(w) for w, _ in results),
                            time.time() - start)
        finally:
            if pool is not None:
                pool.close()
                pool.join()
        self.report_df = pd.DataFrame(rows, columns=self._columns())
        return self

    def _columns(self):
        columns = ['query_file', 'query_gid', 'num_vert', 'num_edge',
                   'num_matched', 'seconds']
        if self._where:
            columns.append('where')
        return columns

    def _report(self, file_name, q, where, seconds):
        row = {
            'query_file': file_name,
            'query_gid': q.gid,
            'num_vert': q.get_num_vertices(),
            'num_edge': q.get_num_edges(),
            'num_matched': len(where),
            'seconds': seconds,
        }
        if self._where:
            row['where'] = where
        if self._verbose:
            q.display()
            print('\nMatched: {}'.format(len(where)))
            if self._where:
                print('where: {}'.format(where))
            print('\n-----------------\n')
        return row
