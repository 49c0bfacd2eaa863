"""VF2 isomorphism and subgraph isomorphism of labeled directed graphs."""
from .graph import Graph
from .loader import read_graphs
from .loader import write_graphs
from .matching import check_mapping
from .matching import isomorphic
from .matching import match
from .matching import sub_isomorphic
from .search import SearchBudgetExceeded
from .search import SearchDriver
from .state import MatchMode
from .state import State
from .vf2 import VF2
