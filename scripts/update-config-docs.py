"""
Regenerates docs/configkeys.rst from the keys, defaults and docs of scritto's config
"""
import argparse
from pathlib import Path

from scritto.config import config


def findDocsFolder() -> Path:
    for folder in (Path(__file__).parent, Path(__file__).parent.parent):
        if (folder / "setup.py").exists():
            return folder / "docs"
    raise RuntimeError("Could not locate the root folder")


parser = argparse.ArgumentParser()
parser.add_argument('-o', '--output', default=None,
                    help="Output file (default: docs/configkeys.rst)")
args = parser.parse_args()

outfile = Path(args.output) if args.output else findDocsFolder() / "configkeys.rst"
rst = config.generateRstDocumentation(linkPrefix='config_')
outfile.write_text(rst)
print("Config documentation written to", outfile)
