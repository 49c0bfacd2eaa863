"""The main program that runs VF2."""
import logging
import os
import sys

from .config import parser
from .vf2 import VF2


def main(FLAGS=None):
    """Run VF2."""
    if FLAGS is None:
        FLAGS, _ = parser.parse_known_args(args=sys.argv[1:])

    for file_name in [FLAGS.database_file_name] + FLAGS.query_file_names:
        if not os.path.exists(file_name):
            print('{} does not exist.'.format(file_name))
            sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if FLAGS.verbose else logging.INFO,
        format='%(asctime)s %(name)s %(levelname)s %(message)s')

    vf2 = VF2(
        database_file_name=FLAGS.database_file_name,
        query_file_names=FLAGS.query_file_names,
        mode=FLAGS.mode,
        max_ngraphs=FLAGS.max_ngraphs,
        max_nqueries=FLAGS.max_nqueries,
        max_states=FLAGS.max_states,
        n_workers=FLAGS.n_workers,
        verbose=FLAGS.verbose,
        where=FLAGS.where
    )

    vf2.run()
    vf2.time_stats()
    print(vf2.report_df)
    if FLAGS.out_path:
        vf2.report_df.to_csv(FLAGS.out_path, index=False)
    return vf2
