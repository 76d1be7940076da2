from typing import Optional

# Local application imports
from hrms.core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    EmployeeProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Settings
    2. Database connection (DatabaseProvider) - connects and fails fast
    3. Repositories (RepositoryProvider) - depends on database
    4. Services (EmployeeProvider) - depend on repositories
    """
    
    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.setup(settings or get_settings())
    
    def setup(self, settings: Settings) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: settings → database → repositories → services
        """
        self.register_singleton(Settings, settings)
        
        # Step 1: Register database connection (foundation)
        DatabaseProvider.register(self)
        
        # Step 2: Register repositories (depends on database)
        RepositoryProvider.register(self)
        
        # Step 3: Register services (depends on repositories)
        EmployeeProvider.register(self)
