from typing import List, Optional
from pydantic import BaseModel


class FileSpec(BaseModel):
    name: Optional[str] = None
    content: str
    encoding: Optional[str] = None


class ExecuteRequest(BaseModel):
    language: str
    version: str
    files: List[FileSpec]
    stdin: Optional[str] = None
    args: Optional[List[str]] = None

    compile_timeout: Optional[int] = None
    run_timeout: Optional[int] = None
    compile_cpu_time: Optional[int] = None
    run_cpu_time: Optional[int] = None
    compile_memory_limit: Optional[int] = None
    run_memory_limit: Optional[int] = None

    def to_payload(self) -> dict:
        # The API expects unset keys to be absent, not null
        return self.model_dump(exclude_none=True)
