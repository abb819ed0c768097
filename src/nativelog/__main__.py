from __future__ import annotations

import sys

from nativelog import main as main_module

sys.exit(main_module.main())
