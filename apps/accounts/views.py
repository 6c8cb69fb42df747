from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    AccountSerializer,
    CreateAccountInputSerializer,
    DepositInputSerializer,
    TransferInputSerializer,
    ErrorResponseSerializer,
)
from .services import (
    get_accounts,
    create_account,
    make_deposit,
    withdraw,
    transfer,
    BankServiceError,
    AccountAlreadyExistsError,
)


def _request_params(request):
    """
    Collect operation parameters from the query string and the body.

    Body values take precedence over query string values.
    """
    params = request.query_params.dict()
    data = request.data
    if hasattr(data, 'dict'):
        data = data.dict()
    if isinstance(data, dict):
        params.update(data)
    return params


@extend_schema(
    responses={200: AccountSerializer(many=True)},
    description="Get all accounts with name and balance.",
    tags=['accounts'],
)
@api_view(['GET'])
def list_accounts(request):
    """List all accounts."""
    serializer = AccountSerializer(get_accounts(), many=True)
    return Response(serializer.data)


@extend_schema(
    request=CreateAccountInputSerializer,
    responses={
        201: AccountSerializer,
        400: ErrorResponseSerializer,
        409: ErrorResponseSerializer,
    },
    description="Create a new account with a zero balance.",
    tags=['accounts'],
)
@api_view(['POST'])
def create(request):
    """Create a new account."""
    serializer = CreateAccountInputSerializer(data=_request_params(request))
    serializer.is_valid(raise_exception=True)

    try:
        account = create_account(**serializer.validated_data)
    except AccountAlreadyExistsError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

    return Response(AccountSerializer(account).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=DepositInputSerializer,
    responses={
        200: AccountSerializer,
        400: ErrorResponseSerializer,
    },
    description="Make deposit on account.",
    tags=['accounts'],
)
@api_view(['PATCH'])
def deposit(request):
    """Add money to an account."""
    serializer = DepositInputSerializer(data=_request_params(request))
    serializer.is_valid(raise_exception=True)

    try:
        account = make_deposit(**serializer.validated_data)
    except BankServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(AccountSerializer(account).data)


@extend_schema(
    request=DepositInputSerializer,
    responses={
        200: AccountSerializer,
        400: ErrorResponseSerializer,
    },
    description="Make withdraw from deposit on account.",
    tags=['accounts'],
)
@api_view(['PATCH'])
def withdraw_deposit(request):
    """Take money from an account."""
    serializer = DepositInputSerializer(data=_request_params(request))
    serializer.is_valid(raise_exception=True)

    try:
        account = withdraw(**serializer.validated_data)
    except BankServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(AccountSerializer(account).data)


@extend_schema(
    request=TransferInputSerializer,
    responses={
        200: AccountSerializer,
        400: ErrorResponseSerializer,
    },
    description="Make transfer from one account to another. Returns the sender account.",
    tags=['accounts'],
)
@api_view(['PATCH'])
def make_transfer(request):
    """Transfer money between two accounts."""
    serializer = TransferInputSerializer(data=_request_params(request))
    serializer.is_valid(raise_exception=True)

    try:
        account = transfer(**serializer.validated_data)
    except BankServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(AccountSerializer(account).data)
