"""Contracts module: ABI, source code, verification and creation info."""

from __future__ import annotations

from typing import Any

from etherscan_sdk.modules.base import BaseModule
from etherscan_sdk.validators import (
    format_param,
    validate_address,
    validate_addresses,
    validate_required,
)

MAX_CREATION_ADDRESSES = 5


class ContractsModule(BaseModule):
    async def get_abi(self, address: str) -> str:
        """ABI of a verified contract, as a JSON string."""
        validate_address(address)
        params = self.create_params("contract", "getabi", address=address)
        return await self._fetch_result(params)

    async def get_source_code(self, address: str) -> list[dict[str, Any]]:
        validate_address(address)
        params = self.create_params("contract", "getsourcecode", address=address)
        return await self._fetch_result(params)

    async def verify_contract(
        self,
        contract_address: str,
        source_code: str,
        contract_name: str,
        compiler_version: str,
        optimization_used: bool,
        runs: int | None = None,
        constructor_arguments: str | None = None,
        evm_version: str | None = None,
        license_type: str | None = None,
    ) -> str:
        """Submit source code for verification; returns a GUID to poll.

        Poll the outcome with :meth:`check_verification_status`.
        """
        validate_required(
            {
                "contractAddress": contract_address,
                "sourceCode": source_code,
                "contractName": contract_name,
                "compilerVersion": compiler_version,
                "optimizationUsed": optimization_used,
            },
            ["contractAddress", "sourceCode", "contractName", "compilerVersion", "optimizationUsed"],
        )
        validate_address(contract_address)

        # "constructorArguements" is the API's own spelling
        params = self.create_params(
            "contract",
            "verifysourcecode",
            contractaddress=contract_address,
            sourceCode=source_code,
            contractname=contract_name,
            compilerversion=compiler_version,
            optimizationUsed=format_param(optimization_used, "boolean"),
            runs=runs,
            constructorArguements=constructor_arguments,
            evmversion=evm_version,
            licenseType=license_type,
        )
        return await self._fetch_result(params)

    async def check_verification_status(self, guid: str) -> str:
        validate_required({"guid": guid}, ["guid"])
        params = self.create_params("contract", "checkverifystatus", guid=guid)
        return await self._fetch_result(params)

    async def get_contract_creation(self, contract_addresses: list[str]) -> list[dict[str, Any]]:
        """Creator address and creation tx hash for up to 5 contracts."""
        validate_addresses(contract_addresses, limit=MAX_CREATION_ADDRESSES, label="Contract addresses")
        params = self.create_params(
            "contract",
            "getcontractcreation",
            contractaddresses=",".join(contract_addresses),
        )
        return await self._fetch_result(params)
