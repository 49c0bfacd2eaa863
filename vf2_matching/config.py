"""Define parameters."""
import argparse


def str2bool(s):
    """Convert str to bool."""
    return s.lower() not in ['false', 'f', '0', 'none', 'no', 'n']


def str2int(s):
    """Convert str to int, 'inf' meaning no limit."""
    return float('inf') if s == 'inf' else int(s)


parser = argparse.ArgumentParser(
    description='Match query graphs against a graph database with VF2.')
parser.add_argument(
    'database_file_name',
    type=str,
    help='graph database file'
)
parser.add_argument(
    'query_file_names',
    type=str,
    nargs='+',
    help='query graph files, matched in the given order'
)
parser.add_argument(
    '-m', '--mode',
    type=str,
    choices=['iso', 'subiso'],
    default='iso',
    help='iso: isomorphism, subiso: subgraph isomorphism, default iso'
)
parser.add_argument(
    '-d', '--max_ngraphs',
    type=str2int,
    default=float('inf'),
    help='maximum number of database graphs to read, default inf'
)
parser.add_argument(
    '-q', '--max_nqueries',
    type=str2int,
    default=float('inf'),
    help='maximum number of graphs to read per query file, default inf'
)
parser.add_argument(
    '-b', '--max_states',
    type=int,
    default=None,
    help='give up a single match after this many search states, '
         'default no limit'
)
parser.add_argument(
    '-w', '--n_workers',
    type=int,
    default=1,
    help='number of worker processes, default 1'
)
parser.add_argument(
    '-v', '--verbose',
    type=str2bool,
    default=False,
    help='verbose output, default off'
)
parser.add_argument(
    '--where',
    type=str2bool,
    default=False,
    help='output where each query graph matches, default off'
)
parser.add_argument(
    '-o', '--out_path',
    type=str,
    default=None,
    help='write the report as CSV to this path'
)
