from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # GET    /api/accounts          - List accounts (name, balance)
    path('accounts', views.list_accounts, name='account-list'),

    # POST   /api/create            - Create account
    path('create', views.create, name='create'),

    # PATCH  /api/makeDeposit       - Deposit on account
    # PATCH  /api/withdrawDeposit   - Withdraw from account
    # PATCH  /api/transfer          - Transfer between accounts
    path('makeDeposit', views.deposit, name='deposit'),
    path('withdrawDeposit', views.withdraw_deposit, name='withdraw'),
    path('transfer', views.make_transfer, name='transfer'),
]
