import sys

from dhchannel.exchange import main

sys.exit(main())
