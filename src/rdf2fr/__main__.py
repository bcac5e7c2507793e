import sys

from rdf2fr.main import main

sys.exit(main())
