# Services Module
# Import submodules directly (core.services.database, core.services.domains);
# this package stays empty so core.auth can import models without cycles.
