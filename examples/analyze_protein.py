#!/usr/bin/env python
"""
Print the center of gravity, the radius of gyration and the maximal
interatomic distance of the ATOM records in one or more PDB files.
"""

import logging
import sys

import pdbstats.utilities.commandline_utils as psuc
import pdbstats.model.descriptors as psmd
import pdbstats.utilities.exceptions as psue

log = logging.getLogger(__name__)


def get_parser():
    parser = psuc.get_pdb_input_parser("Calculate the center of gravity (Cg), the radius "
                                       "of gyration (Rg) and the maximal distance between "
                                       "two atoms (Dmax) for every PDB file.",
                                       enable_logging=True)
    output_group = parser.add_argument_group("Controlling output")
    output_group.add_argument("--csv", type=str,
                              help="In addition to the report, store one row per "
                                   "successfully analysed file in this csv file.")
    output_group.add_argument("--force", action="store_true",
                              help="Overwrite the csv file, if it exists.")
    return parser


def main(args, parser=None):
    with psuc.hide_traceback((psue.UsageError, psue.PdbFileError, IOError)):
        filenames = psuc.pdb_files_from_args(args, parser, enable_logging=True)
        summaries, failed = psuc.analyze_pdb_files(filenames,
                                                   skip_errors=(args.on_error == "skip"),
                                                   max_atoms=args.max_atoms)
        if args.csv:
            df = psmd.summaries_to_dataframe(summaries)
            with psuc.open_for_out(args.csv, args.force) as f:
                df.to_csv(f, index=False)
        if failed:
            log.error("%d of %d files could not be analysed: %s",
                      len(failed), len(filenames), ", ".join(failed))
            sys.exit(1)


if __name__ == "__main__":
    parser = get_parser()
    args = parser.parse_args()
    main(args, parser)
