from .register_customer import RegisterCustomerUseCase
from .get_customer import GetCustomerUseCase
from .list_customers import ListCustomersUseCase

__all__ = ["RegisterCustomerUseCase", "GetCustomerUseCase", "ListCustomersUseCase"]
