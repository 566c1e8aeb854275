import sys
import argparse
import logging
import os.path
import contextlib

import logging_exceptions

from .exceptions import PdbFileError, UsageError
import pdbstats.config
import pdbstats.model.descriptors as psmd

log = logging.getLogger(__name__)


def get_pdb_input_parser(helptext, enable_logging=True, parser_kwargs={}):
    """
    An argparse parser accepting any number of PDB files and the options
    shared by all pdbstats scripts.

    Zero files are accepted by the parser itself, use `pdb_files_from_args`
    to turn that into a UsageError.
    """
    parser = argparse.ArgumentParser(description=helptext, **parser_kwargs)
    parser.add_argument("pdb", nargs="*", type=str,
                        help="One or more PDB files. Only lines starting with\n"
                             "'ATOM  ' are read.")
    pdb_input_group = parser.add_argument_group("Options for loading of PDB files")
    pdb_input_group.add_argument("--max-atoms", type=int, default=None,
                                 help="The maximal number of atoms per file. "
                                      "Files with more atoms are rejected. "
                                      "Defaults to the value in the config file or {}.".format(
                                          pdbstats.config.DEFAULT_MAX_ATOMS))
    pdb_input_group.add_argument("--on-error", choices=pdbstats.config.ALLOWED_KEY_VALUES["ON_ERROR"],
                                 default=None,
                                 help="'abort': stop at the first file that cannot be analysed. "
                                      "'skip': report the error, continue with the next file "
                                      "and exit with a non-zero status at the end. "
                                      "Defaults to the value in the config file or 'abort'.")
    if enable_logging:
        verbosity_group = parser.add_argument_group(
            "Control verbosity of logging output")
        logging_exceptions.update_parser(verbosity_group)
    return parser


def pdb_files_from_args(args, parser=None, enable_logging=True):
    """
    Return the list of PDB filenames from an argparse Namespace, after
    filling in defaults for the options from the configuration files.

    :param args: A argparse Namespace.
    :param parser: The parser that created args. Used for the usage message.
    :param enable_logging: Call logging.basicConfig() and use args.verbose
                    and args.debug to set the level for different loggers.
    :raises: UsageError, if no file was given.
    """
    if enable_logging:
        logging.basicConfig(
            format="%(levelname)s:%(name)s.%(funcName)s[%(lineno)d]: %(message)s")
        logging_exceptions.config_from_args(args)
    if not args.pdb:
        message = "At least one PDB file is required."
        if parser is not None:
            message = parser.format_usage() + message
        raise UsageError(message)
    config = pdbstats.config.read_config()
    if args.max_atoms is None:
        args.max_atoms = pdbstats.config.get_max_atoms(config)
    elif args.max_atoms < 1:
        raise UsageError("--max-atoms has to be positive, not {}".format(args.max_atoms))
    if args.on_error is None:
        args.on_error = pdbstats.config.get_on_error(config)
    return args.pdb


def analyze_pdb_files(filenames, out=None, skip_errors=False, max_atoms=None):
    """
    Describe every file in turn and print the report to out.

    :param out: A file-like object. Defaults to sys.stdout
    :param skip_errors: Boolean. Log PdbFileErrors and continue with
                    the next filename instead of letting the error propagate.
    :returns: A tuple `summaries, failed`, where failed is a list of the
              filenames that were skipped.
    """
    if out is None:
        out = sys.stdout
    summaries = []
    failed = []
    for filename in filenames:
        log.debug("Analysing PDB %s", filename)
        try:
            summary = psmd.describe_pdb(filename, max_atoms=max_atoms)
        except PdbFileError as e:
            if not skip_errors:
                log.error("An error occurred while analysing the file %s", filename)
                raise
            log.exception("The PDB %s was skipped due to the following error", filename)
            replay_log(e)
            failed.append(filename)
        else:
            print(psmd.format_summary(summary), file=out)
            summaries.append(summary)
    return summaries, failed


@contextlib.contextmanager
def open_for_out(filename=None, force=False):
    "From http://stackoverflow.com/a/17603000/5069869"
    if filename and filename != '-':
        if not force and os.path.isfile(filename):
            raise IOError(
                "Cannot create file {}. File exists.".format(filename))
        fh = open(filename, 'w')
    else:
        fh = sys.stdout
    try:
        yield fh
    finally:
        if fh is not sys.stdout:
            fh.close()


def replay_log(error):
    """
    Emit the log records that logging_exceptions attached to error.
    """
    for record in getattr(error, "log", []):
        logging.getLogger(record.name).handle(record)


@contextlib.contextmanager
def hide_traceback(error_class=(UsageError, PdbFileError)):
    """
    A context manager that catches errors of the specified class and outputs
    only the error message before calling sys.exit(1).
    """
    try:
        yield
    except error_class as e:
        # Integration with logging_exceptions
        replay_log(e)
        print("Error of type {} occurred. Aborting.".format(type(e).__name__),
              file=sys.stderr)
        print(e, file=sys.stderr)
        sys.exit(1)
