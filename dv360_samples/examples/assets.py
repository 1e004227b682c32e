"""Sample: upload a creative asset for an advertiser.

The uploaded file is staged in ``data/files/{asset_id}/`` before it is
sent to the API as a media upload, and the staged copy is removed afterwards.
"""

from __future__ import annotations

import logging
import os
import shutil

from googleapiclient.http import MediaIoBaseUpload

from dv360_samples.config import Config, ensure_data_dirs
from dv360_samples.examples.base import BaseExample, ParameterDescriptor, RequestContext
from dv360_samples.utils.html import render_result_list
from dv360_samples.utils.ids import new_id
from dv360_samples.utils.io_utils import ensure_dir, file_sha1, safe_filename


class UploadCreativeAsset(BaseExample):
    @classmethod
    def get_name(cls) -> str:
        return "Upload Creative Asset"

    def get_input_parameters(self):
        return (
            ParameterDescriptor("advertiser_id", "Advertiser ID", required=True),
            ParameterDescriptor("asset_file", "Asset file", required=True, file=True),
        )

    def run(self, ctx: RequestContext) -> str:
        ensure_data_dirs()
        advertiser_id = self.form_values["advertiser_id"]
        upload = self.form_values["asset_file"]
        filename = safe_filename(upload.filename)
        mime = upload.mimetype or "application/octet-stream"

        sdir = os.path.join(Config.FILES_DIR, new_id("asset"))
        ensure_dir(sdir)
        try:
            dest = os.path.join(sdir, filename)
            upload.save(dest)
            logging.info(f"Uploading asset {filename} ({os.path.getsize(dest)} bytes, sha1={file_sha1(dest)}) for advertiser {advertiser_id}")
            with open(dest, "rb") as fh:
                media = MediaIoBaseUpload(fh, mimetype=mime, resumable=False)
                response = (
                    self.service.advertisers()
                    .assets()
                    .upload(advertiserId=advertiser_id, body={"filename": filename}, media_body=media)
                    .execute()
                )
        finally:
            shutil.rmtree(sdir, ignore_errors=True)

        asset = response.get("asset") or {}
        return render_result_list(
            "Uploaded asset",
            [("Filename", filename), ("Media ID", asset.get("mediaId", ""))],
        )
