from setuptools import setup
from setuptools.command.build_py import build_py as _build_py
import subprocess
import os
import itertools
import logging

logging.basicConfig()
log = logging.getLogger(__file__)


try: #If we are in a git-repo, get git-describe version.
    path = os.path.abspath(os.path.dirname(__file__))
    pdbstats_version = subprocess.check_output(["git", "describe", "--always"], cwd=path,
                                               stderr=subprocess.DEVNULL,
                                               universal_newlines=True).strip()
    try:
        subprocess.check_call(['git', 'diff-index', '--quiet', 'HEAD', '--'], cwd=path,
                              stderr=subprocess.DEVNULL, universal_newlines=True)
    except subprocess.CalledProcessError:
        pdbstats_version+="+uncommited_changes"
    #Use a subclass of build_py to costumize the build.
    class build_py(_build_py):
        def run(self):
            """
            During building, adds a variable with the complete version (from git describe)
            to pdbstats/__init__.py.
            """
            outfile = self.get_module_outfile(self.build_lib, ["pdbstats"], "__init__")
            try:
                os.remove(outfile) #If we have an old version, delete it, so _build_py will copy the original version into the build directory.
            except OSError:
                pass
            # Superclass build
            _build_py.run(self)
            # Apped the version number to init.py
            with open(outfile, "a") as of:
                of.write('\n__complete_version__ = "{}"'.format(pdbstats_version))
except (OSError, subprocess.CalledProcessError): #Outside of a git repo, do nothing.
    log.info("Not a git repository, building without complete version")
    build_py = _build_py


extras = {"tests":["ddt", "hypothesis", "nose2", "pytest"]
         }
extras["all"]=list(itertools.chain(*extras.values()))
setup_args = {
      "zip_safe":False,
      "cmdclass":{'build_py': build_py},
      "name":'pdbstats',
      "version":'1.0.0',
      "description":'Center of gravity, radius of gyration and maximal extent of PDB structures',
      "author":'pdbstats developers',
      "license":'GNU GPL 3.0',
      "packages":['pdbstats', 'pdbstats.utilities', 'pdbstats.model'],
      "scripts":['examples/analyze_protein.py',
               'examples/pdbstats_config.py'],
      "python_requires":'>=3.6',
      "install_requires":[
		'numpy>=1.10.0',
                'scipy>=0.19.1',
                'pandas>=0.20',
                'biopython',
                'appdirs>=1.4',
                'logging_exceptions>=0.1.9',
	],
      "extras_require":extras,
    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    "classifiers":[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Science/Research',
        'Operating System :: POSIX :: Linux',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
        'Topic :: Scientific/Engineering :: Chemistry',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
         ],
     }

setup(**setup_args)
