"""
Reference data.

Media types known to benefit from generic compression (gzip, brotli,
deflate), as published by mime-db. Keys are stored exactly as the registry
provides them.
"""

from typing import Tuple

# =============================================================================
# Provenance
# =============================================================================

MIME_DB_COMMIT: str = "fa5e4ef3cc8907ec3c5ec5b85af0c63d7059a5cd"
MIME_DB_SOURCE_URL: str = (
    f"https://github.com/jshttp/mime-db/blob/{MIME_DB_COMMIT}/db.json"
)

# =============================================================================
# Compressible Media Types
# =============================================================================

COMPRESSIBLE_MEDIA_TYPES: Tuple[Tuple[str, bool], ...] = (
    ("application/3gpdash-qoe-report+xml", True),
    ("application/3gpp-ims+xml", True),
    ("application/3gpphal+json", True),
    ("application/3gpphalforms+json", True),
    ("application/activity+json", True),
    ("application/alto-costmap+json", True),
    ("application/alto-costmapfilter+json", True),
    ("application/alto-directory+json", True),
    ("application/alto-endpointcost+json", True),
    ("application/alto-endpointcostparams+json", True),
    ("application/alto-endpointprop+json", True),
    ("application/alto-endpointpropparams+json", True),
    ("application/alto-error+json", True),
    ("application/alto-networkmap+json", True),
    ("application/alto-networkmapfilter+json", True),
    ("application/alto-updatestreamcontrol+json", True),
    ("application/alto-updatestreamparams+json", True),
    ("application/atom+xml", True),
    ("application/atomcat+xml", True),
    ("application/atomdeleted+xml", True),
    ("application/atomsvc+xml", True),
    ("application/atsc-dwd+xml", True),
    ("application/atsc-held+xml", True),
    ("application/atsc-rdt+json", True),
    ("application/atsc-rsat+xml", True),
    ("application/auth-policy+xml", True),
    ("application/beep+xml", True),
    ("application/calendar+json", True),
    ("application/calendar+xml", True),
    ("application/captive+json", True),
    ("application/ccmp+xml", True),
    ("application/ccxml+xml", True),
    ("application/cdfx+xml", True),
    ("application/cea-2018+xml", True),
    ("application/cellml+xml", True),
    ("application/clue+xml", True),
    ("application/clue_info+xml", True),
    ("application/cnrp+xml", True),
    ("application/coap-group+json", True),
    ("application/conference-info+xml", True),
    ("application/cpl+xml", True),
    ("application/csta+xml", True),
    ("application/cstadata+xml", True),
    ("application/csvm+json", True),
    ("application/dart", True),
    ("application/dash+xml", True),
    ("application/davmount+xml", True),
    ("application/dialog-info+xml", True),
    ("application/dicom+json", True),
    ("application/dicom+xml", True),
    ("application/dns+json", True),
    ("application/docbook+xml", True),
    ("application/dskpp+xml", True),
    ("application/dssc+xml", True),
    ("application/ecmascript", True),
    ("application/elm+json", True),
    ("application/elm+xml", True),
    ("application/emergencycalldata.cap+xml", True),
    ("application/emergencycalldata.comment+xml", True),
    ("application/emergencycalldata.control+xml", True),
    ("application/emergencycalldata.deviceinfo+xml", True),
    ("application/emergencycalldata.providerinfo+xml", True),
    ("application/emergencycalldata.serviceinfo+xml", True),
    ("application/emergencycalldata.subscriberinfo+xml", True),
    ("application/emergencycalldata.veds+xml", True),
    ("application/emma+xml", True),
    ("application/emotionml+xml", True),
    ("application/epp+xml", True),
    ("application/expect-ct-report+json", True),
    ("application/fdt+xml", True),
    ("application/fhir+json", True),
    ("application/fhir+xml", True),
    ("application/fido.trusted-apps+json", True),
    ("application/framework-attributes+xml", True),
    ("application/geo+json", True),
    ("application/geoxacml+xml", True),
    ("application/gml+xml", True),
    ("application/gpx+xml", True),
    ("application/held+xml", True),
    ("application/ibe-key-request+xml", True),
    ("application/ibe-pkg-reply+xml", True),
    ("application/im-iscomposing+xml", True),
    ("application/inkml+xml", True),
    ("application/its+xml", True),
    ("application/javascript", True),
    ("application/jf2feed+json", True),
    ("application/jose+json", True),
    ("application/jrd+json", True),
    ("application/jscalendar+json", True),
    ("application/json", True),
    ("application/json-patch+json", True),
    ("application/jsonml+json", True),
    ("application/jwk+json", True),
    ("application/jwk-set+json", True),
    ("application/kpml-request+xml", True),
    ("application/kpml-response+xml", True),
    ("application/ld+json", True),
    ("application/lgr+xml", True),
    ("application/load-control+xml", True),
    ("application/lost+xml", True),
    ("application/lostsync+xml", True),
    ("application/mads+xml", True),
    ("application/manifest+json", True),
    ("application/marcxml+xml", True),
    ("application/mathml+xml", True),
    ("application/mathml-content+xml", True),
    ("application/mathml-presentation+xml", True),
    ("application/mbms-associated-procedure-description+xml", True),
    ("application/mbms-deregister+xml", True),
    ("application/mbms-envelope+xml", True),
    ("application/mbms-msk+xml", True),
    ("application/mbms-msk-response+xml", True),
    ("application/mbms-protection-description+xml", True),
    ("application/mbms-reception-report+xml", True),
    ("application/mbms-register+xml", True),
    ("application/mbms-register-response+xml", True),
    ("application/mbms-schedule+xml", True),
    ("application/mbms-user-service-description+xml", True),
    ("application/media-policy-dataset+xml", True),
    ("application/media_control+xml", True),
    ("application/mediaservercontrol+xml", True),
    ("application/merge-patch+json", True),
    ("application/metalink+xml", True),
    ("application/metalink4+xml", True),
    ("application/mets+xml", True),
    ("application/mmt-aei+xml", True),
    ("application/mmt-usd+xml", True),
    ("application/mods+xml", True),
    ("application/mrb-consumer+xml", True),
    ("application/mrb-publish+xml", True),
    ("application/msc-ivr+xml", True),
    ("application/msc-mixer+xml", True),
    ("application/mud+json", True),
    ("application/nlsml+xml", True),
    ("application/odm+xml", True),
    ("application/oebps-package+xml", True),
    ("application/omdoc+xml", True),
    ("application/opc-nodeset+xml", True),
    ("application/p2p-overlay+xml", True),
    ("application/patch-ops-error+xml", True),
    ("application/pidf+xml", True),
    ("application/pidf-diff+xml", True),
    ("application/pls+xml", True),
    ("application/poc-settings+xml", True),
    ("application/postscript", True),
    ("application/ppsp-tracker+json", True),
    ("application/problem+json", True),
    ("application/problem+xml", True),
    ("application/provenance+xml", True),
    ("application/prs.xsf+xml", True),
    ("application/pskc+xml", True),
    ("application/pvd+json", True),
    ("application/raml+yaml", True),
    ("application/rdap+json", True),
    ("application/rdf+xml", True),
    ("application/reginfo+xml", True),
    ("application/reputon+json", True),
    ("application/resource-lists+xml", True),
    ("application/resource-lists-diff+xml", True),
    ("application/rfc+xml", True),
    ("application/rlmi+xml", True),
    ("application/rls-services+xml", True),
    ("application/route-apd+xml", True),
    ("application/route-s-tsid+xml", True),
    ("application/route-usd+xml", True),
    ("application/rsd+xml", True),
    ("application/rss+xml", True),
    ("application/rtf", True),
    ("application/samlassertion+xml", True),
    ("application/samlmetadata+xml", True),
    ("application/sarif+json", True),
    ("application/sarif-external-properties+json", True),
    ("application/sbml+xml", True),
    ("application/scaip+xml", True),
    ("application/scim+json", True),
    ("application/senml+json", True),
    ("application/senml+xml", True),
    ("application/senml-etch+json", True),
    ("application/sensml+json", True),
    ("application/sensml+xml", True),
    ("application/sep+xml", True),
    ("application/shf+xml", True),
    ("application/simple-filter+xml", True),
    ("application/smil+xml", True),
    ("application/soap+xml", True),
    ("application/sparql-results+xml", True),
    ("application/spirits-event+xml", True),
    ("application/srgs+xml", True),
    ("application/sru+xml", True),
    ("application/ssdl+xml", True),
    ("application/ssml+xml", True),
    ("application/stix+json", True),
    ("application/swid+xml", True),
    ("application/tar", True),
    ("application/taxii+json", True),
    ("application/td+json", True),
    ("application/tei+xml", True),
    ("application/thraud+xml", True),
    ("application/tlsrpt+json", True),
    ("application/toml", True),
    ("application/ttml+xml", True),
    ("application/urc-grpsheet+xml", True),
    ("application/urc-ressheet+xml", True),
    ("application/urc-targetdesc+xml", True),
    ("application/urc-uisocketdesc+xml", True),
    ("application/vcard+json", True),
    ("application/vcard+xml", True),
    ("application/vnd.1000minds.decision-model+xml", True),
    ("application/vnd.3gpp-prose+xml", True),
    ("application/vnd.3gpp-prose-pc3ch+xml", True),
    ("application/vnd.3gpp.access-transfer-events+xml", True),
    ("application/vnd.3gpp.bsf+xml", True),
    ("application/vnd.3gpp.gmop+xml", True),
    ("application/vnd.3gpp.mcdata-affiliation-command+xml", True),
    ("application/vnd.3gpp.mcdata-info+xml", True),
    ("application/vnd.3gpp.mcdata-service-config+xml", True),
    ("application/vnd.3gpp.mcdata-ue-config+xml", True),
    ("application/vnd.3gpp.mcdata-user-profile+xml", True),
    ("application/vnd.3gpp.mcptt-affiliation-command+xml", True),
    ("application/vnd.3gpp.mcptt-floor-request+xml", True),
    ("application/vnd.3gpp.mcptt-info+xml", True),
    ("application/vnd.3gpp.mcptt-location-info+xml", True),
    ("application/vnd.3gpp.mcptt-mbms-usage-info+xml", True),
    ("application/vnd.3gpp.mcptt-service-config+xml", True),
    ("application/vnd.3gpp.mcptt-signed+xml", True),
    ("application/vnd.3gpp.mcptt-ue-config+xml", True),
    ("application/vnd.3gpp.mcptt-ue-init-config+xml", True),
    ("application/vnd.3gpp.mcptt-user-profile+xml", True),
    ("application/vnd.3gpp.mcvideo-affiliation-command+xml", True),
    ("application/vnd.3gpp.mcvideo-affiliation-info+xml", True),
    ("application/vnd.3gpp.mcvideo-info+xml", True),
    ("application/vnd.3gpp.mcvideo-location-info+xml", True),
    ("application/vnd.3gpp.mcvideo-mbms-usage-info+xml", True),
    ("application/vnd.3gpp.mcvideo-service-config+xml", True),
    ("application/vnd.3gpp.mcvideo-transmission-request+xml", True),
    ("application/vnd.3gpp.mcvideo-ue-config+xml", True),
    ("application/vnd.3gpp.mcvideo-user-profile+xml", True),
    ("application/vnd.3gpp.mid-call+xml", True),
    ("application/vnd.3gpp.sms+xml", True),
    ("application/vnd.3gpp.srvcc-ext+xml", True),
    ("application/vnd.3gpp.srvcc-info+xml", True),
    ("application/vnd.3gpp.state-and-event-info+xml", True),
    ("application/vnd.3gpp.ussd+xml", True),
    ("application/vnd.3gpp2.bcmcsinfo+xml", True),
    ("application/vnd.adobe.xdp+xml", True),
    ("application/vnd.amadeus+json", True),
    ("application/vnd.amundsen.maze+xml", True),
    ("application/vnd.api+json", True),
    ("application/vnd.aplextor.warrp+json", True),
    ("application/vnd.apothekende.reservation+json", True),
    ("application/vnd.apple.installer+xml", True),
    ("application/vnd.artisan+json", True),
    ("application/vnd.avalon+json", True),
    ("application/vnd.avistar+xml", True),
    ("application/vnd.balsamiq.bmml+xml", True),
    ("application/vnd.bbf.usp.msg+json", True),
    ("application/vnd.bekitzur-stech+json", True),
    ("application/vnd.biopax.rdf+xml", True),
    ("application/vnd.byu.uapi+json", True),
    ("application/vnd.capasystems-pg+json", True),
    ("application/vnd.chemdraw+xml", True),
    ("application/vnd.citationstyles.style+xml", True),
    ("application/vnd.collection+json", True),
    ("application/vnd.collection.doc+json", True),
    ("application/vnd.collection.next+json", True),
    ("application/vnd.coreos.ignition+json", True),
    ("application/vnd.criticaltools.wbs+xml", True),
    ("application/vnd.cryptii.pipe+json", True),
    ("application/vnd.ctct.ws+xml", True),
    ("application/vnd.cyan.dean.root+xml", True),
    ("application/vnd.cyclonedx+json", True),
    ("application/vnd.cyclonedx+xml", True),
    ("application/vnd.dart", True),
    ("application/vnd.datapackage+json", True),
    ("application/vnd.dataresource+json", True),
    ("application/vnd.dece.ttml+xml", True),
    ("application/vnd.dm.delegation+xml", True),
    ("application/vnd.document+json", True),
    ("application/vnd.drive+json", True),
    ("application/vnd.dvb.dvbisl+xml", True),
    ("application/vnd.dvb.notif-aggregate-root+xml", True),
    ("application/vnd.dvb.notif-container+xml", True),
    ("application/vnd.dvb.notif-generic+xml", True),
    ("application/vnd.dvb.notif-ia-msglist+xml", True),
    ("application/vnd.dvb.notif-ia-registration-request+xml", True),
    ("application/vnd.dvb.notif-ia-registration-response+xml", True),
    ("application/vnd.dvb.notif-init+xml", True),
    ("application/vnd.emclient.accessrequest+xml", True),
    ("application/vnd.eprints.data+xml", True),
    ("application/vnd.eszigno3+xml", True),
    ("application/vnd.etsi.aoc+xml", True),
    ("application/vnd.etsi.cug+xml", True),
    ("application/vnd.etsi.iptvcommand+xml", True),
    ("application/vnd.etsi.iptvdiscovery+xml", True),
    ("application/vnd.etsi.iptvprofile+xml", True),
    ("application/vnd.etsi.iptvsad-bc+xml", True),
    ("application/vnd.etsi.iptvsad-cod+xml", True),
    ("application/vnd.etsi.iptvsad-npvr+xml", True),
    ("application/vnd.etsi.iptvservice+xml", True),
    ("application/vnd.etsi.iptvsync+xml", True),
    ("application/vnd.etsi.iptvueprofile+xml", True),
    ("application/vnd.etsi.mcid+xml", True),
    ("application/vnd.etsi.overload-control-policy-dataset+xml", True),
    ("application/vnd.etsi.pstn+xml", True),
    ("application/vnd.etsi.sci+xml", True),
    ("application/vnd.etsi.simservs+xml", True),
    ("application/vnd.etsi.tsl+xml", True),
    ("application/vnd.fujifilm.fb.jfi+xml", True),
    ("application/vnd.futoin+json", True),
    ("application/vnd.gentics.grd+json", True),
    ("application/vnd.geo+json", True),
    ("application/vnd.geocube+xml", True),
    ("application/vnd.google-earth.kml+xml", True),
    ("application/vnd.gov.sk.e-form+xml", True),
    ("application/vnd.gov.sk.xmldatacontainer+xml", True),
    ("application/vnd.hal+json", True),
    ("application/vnd.hal+xml", True),
    ("application/vnd.handheld-entertainment+xml", True),
    ("application/vnd.hc+json", True),
    ("application/vnd.heroku+json", True),
    ("application/vnd.hyper+json", True),
    ("application/vnd.hyper-item+json", True),
    ("application/vnd.hyperdrive+json", True),
    ("application/vnd.ims.lis.v2.result+json", True),
    ("application/vnd.ims.lti.v2.toolconsumerprofile+json", True),
    ("application/vnd.ims.lti.v2.toolproxy+json", True),
    ("application/vnd.ims.lti.v2.toolproxy.id+json", True),
    ("application/vnd.ims.lti.v2.toolsettings+json", True),
    ("application/vnd.ims.lti.v2.toolsettings.simple+json", True),
    ("application/vnd.informedcontrol.rms+xml", True),
    ("application/vnd.infotech.project+xml", True),
    ("application/vnd.iptc.g2.catalogitem+xml", True),
    ("application/vnd.iptc.g2.conceptitem+xml", True),
    ("application/vnd.iptc.g2.knowledgeitem+xml", True),
    ("application/vnd.iptc.g2.newsitem+xml", True),
    ("application/vnd.iptc.g2.newsmessage+xml", True),
    ("application/vnd.iptc.g2.packageitem+xml", True),
    ("application/vnd.iptc.g2.planningitem+xml", True),
    ("application/vnd.irepository.package+xml", True),
    ("application/vnd.las.las+json", True),
    ("application/vnd.las.las+xml", True),
    ("application/vnd.leap+json", True),
    ("application/vnd.liberty-request+xml", True),
    ("application/vnd.llamagraphics.life-balance.exchange+xml", True),
    ("application/vnd.marlin.drm.actiontoken+xml", True),
    ("application/vnd.marlin.drm.conftoken+xml", True),
    ("application/vnd.marlin.drm.license+xml", True),
    ("application/vnd.mason+json", True),
    ("application/vnd.micro+json", True),
    ("application/vnd.miele+json", True),
    ("application/vnd.mozilla.xul+xml", True),
    ("application/vnd.ms-fontobject", True),
    ("application/vnd.ms-office.activex+xml", True),
    ("application/vnd.ms-opentype", True),
    ("application/vnd.ms-playready.initiator+xml", True),
    ("application/vnd.ms-printdevicecapabilities+xml", True),
    ("application/vnd.ms-printing.printticket+xml", True),
    ("application/vnd.ms-printschematicket+xml", True),
    ("application/vnd.nearst.inv+json", True),
    ("application/vnd.nokia.conml+xml", True),
    ("application/vnd.nokia.iptv.config+xml", True),
    ("application/vnd.nokia.landmark+xml", True),
    ("application/vnd.nokia.landmarkcollection+xml", True),
    ("application/vnd.nokia.n-gage.ac+xml", True),
    ("application/vnd.nokia.pcd+xml", True),
    ("application/vnd.oci.image.manifest.v1+json", True),
    ("application/vnd.oftn.l10n+json", True),
    ("application/vnd.oipf.contentaccessdownload+xml", True),
    ("application/vnd.oipf.contentaccessstreaming+xml", True),
    ("application/vnd.oipf.dae.svg+xml", True),
    ("application/vnd.oipf.dae.xhtml+xml", True),
    ("application/vnd.oipf.mippvcontrolmessage+xml", True),
    ("application/vnd.oipf.spdiscovery+xml", True),
    ("application/vnd.oipf.spdlist+xml", True),
    ("application/vnd.oipf.ueprofile+xml", True),
    ("application/vnd.oipf.userprofile+xml", True),
    ("application/vnd.oma.bcast.associated-procedure-parameter+xml", True),
    ("application/vnd.oma.bcast.drm-trigger+xml", True),
    ("application/vnd.oma.bcast.imd+xml", True),
    ("application/vnd.oma.bcast.notification+xml", True),
    ("application/vnd.oma.bcast.sgdd+xml", True),
    ("application/vnd.oma.bcast.smartcard-trigger+xml", True),
    ("application/vnd.oma.bcast.sprov+xml", True),
    ("application/vnd.oma.cab-address-book+xml", True),
    ("application/vnd.oma.cab-feature-handler+xml", True),
    ("application/vnd.oma.cab-pcc+xml", True),
    ("application/vnd.oma.cab-subs-invite+xml", True),
    ("application/vnd.oma.cab-user-prefs+xml", True),
    ("application/vnd.oma.dd2+xml", True),
    ("application/vnd.oma.drm.risd+xml", True),
    ("application/vnd.oma.group-usage-list+xml", True),
    ("application/vnd.oma.lwm2m+json", True),
    ("application/vnd.oma.pal+xml", True),
    ("application/vnd.oma.poc.detailed-progress-report+xml", True),
    ("application/vnd.oma.poc.final-report+xml", True),
    ("application/vnd.oma.poc.groups+xml", True),
    ("application/vnd.oma.poc.invocation-descriptor+xml", True),
    ("application/vnd.oma.poc.optimized-progress-report+xml", True),
    ("application/vnd.oma.scidm.messages+xml", True),
    ("application/vnd.oma.xcap-directory+xml", True),
    ("application/vnd.omads-email+xml", True),
    ("application/vnd.omads-file+xml", True),
    ("application/vnd.omads-folder+xml", True),
    ("application/vnd.openblox.game+xml", True),
    ("application/vnd.openstreetmap.data+xml", True),
    ("application/vnd.openxmlformats-officedocument.custom-properties+xml", True),
    ("application/vnd.openxmlformats-officedocument.customxmlproperties+xml", True),
    ("application/vnd.openxmlformats-officedocument.drawing+xml", True),
    ("application/vnd.openxmlformats-officedocument.drawingml.chart+xml", True),
    ("application/vnd.openxmlformats-officedocument.drawingml.chartshapes+xml", True),
    ("application/vnd.openxmlformats-officedocument.drawingml.diagramcolors+xml", True),
    ("application/vnd.openxmlformats-officedocument.drawingml.diagramdata+xml", True),
    ("application/vnd.openxmlformats-officedocument.drawingml.diagramlayout+xml", True),
    ("application/vnd.openxmlformats-officedocument.drawingml.diagramstyle+xml", True),
    ("application/vnd.openxmlformats-officedocument.extended-properties+xml", True),
    ("application/vnd.openxmlformats-officedocument.presentationml.commentauthors+xml", True),
    ("application/vnd.openxmlformats-officedocument.presentationml.comments+xml", True),
    ("application/vnd.openxmlformats-officedocument.presentationml.handoutmaster+xml", True),
    ("application/vnd.openxmlformats-officedocument.presentationml.notesmaster+xml", True),
    ("application/vnd.openxmlformats-officedocument.presentationml.notesslide+xml", True),
    ("application/vnd.openxmlformats-officedocument.presentationml.presentation.main+xml", True),
    ("application/vnd.openxmlformats-officedocument.presentationml.presprops+xml", True),
    ("application/vnd.openxmlformats-officedocument.presentationml.slide+xml", True),
    ("application/vnd.openxmlformats-officedocument.presentationml.slidelayout+xml", True),
    ("application/vnd.openxmlformats-officedocument.presentationml.slidemaster+xml", True),
    ("application/vnd.openxmlformats-officedocument.presentationml.slideshow.main+xml", True),
    ("application/vnd.openxmlformats-officedocument.presentationml.slideupdateinfo+xml", True),
    ("application/vnd.openxmlformats-officedocument.presentationml.tablestyles+xml", True),
    ("application/vnd.openxmlformats-officedocument.presentationml.tags+xml", True),
    ("application/vnd.openxmlformats-officedocument.presentationml.template.main+xml", True),
    ("application/vnd.openxmlformats-officedocument.presentationml.viewprops+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.calcchain+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.chartsheet+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.comments+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.connections+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.dialogsheet+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.externallink+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.pivotcachedefinition+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.pivotcacherecords+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.pivottable+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.querytable+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.revisionheaders+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.revisionlog+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.sharedstrings+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet.main+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.sheetmetadata+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.styles+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.table+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.tablesinglecells+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.template.main+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.usernames+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.volatiledependencies+xml", True),
    ("application/vnd.openxmlformats-officedocument.spreadsheetml.worksheet+xml", True),
    ("application/vnd.openxmlformats-officedocument.theme+xml", True),
    ("application/vnd.openxmlformats-officedocument.themeoverride+xml", True),
    ("application/vnd.openxmlformats-officedocument.wordprocessingml.comments+xml", True),
    ("application/vnd.openxmlformats-officedocument.wordprocessingml.document.glossary+xml", True),
    ("application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml", True),
    ("application/vnd.openxmlformats-officedocument.wordprocessingml.endnotes+xml", True),
    ("application/vnd.openxmlformats-officedocument.wordprocessingml.fonttable+xml", True),
    ("application/vnd.openxmlformats-officedocument.wordprocessingml.footer+xml", True),
    ("application/vnd.openxmlformats-officedocument.wordprocessingml.footnotes+xml", True),
    ("application/vnd.openxmlformats-officedocument.wordprocessingml.numbering+xml", True),
    ("application/vnd.openxmlformats-officedocument.wordprocessingml.settings+xml", True),
    ("application/vnd.openxmlformats-officedocument.wordprocessingml.styles+xml", True),
    ("application/vnd.openxmlformats-officedocument.wordprocessingml.template.main+xml", True),
    ("application/vnd.openxmlformats-officedocument.wordprocessingml.websettings+xml", True),
    ("application/vnd.openxmlformats-package.core-properties+xml", True),
    ("application/vnd.openxmlformats-package.digital-signature-xmlsignature+xml", True),
    ("application/vnd.openxmlformats-package.relationships+xml", True),
    ("application/vnd.oracle.resource+json", True),
    ("application/vnd.otps.ct-kip+xml", True),
    ("application/vnd.pagerduty+json", True),
    ("application/vnd.poc.group-advertisement+xml", True),
    ("application/vnd.pwg-xhtml-print+xml", True),
    ("application/vnd.radisys.moml+xml", True),
    ("application/vnd.radisys.msml+xml", True),
    ("application/vnd.radisys.msml-audit+xml", True),
    ("application/vnd.radisys.msml-audit-conf+xml", True),
    ("application/vnd.radisys.msml-audit-conn+xml", True),
    ("application/vnd.radisys.msml-audit-dialog+xml", True),
    ("application/vnd.radisys.msml-audit-stream+xml", True),
    ("application/vnd.radisys.msml-conf+xml", True),
    ("application/vnd.radisys.msml-dialog+xml", True),
    ("application/vnd.radisys.msml-dialog-base+xml", True),
    ("application/vnd.radisys.msml-dialog-fax-detect+xml", True),
    ("application/vnd.radisys.msml-dialog-fax-sendrecv+xml", True),
    ("application/vnd.radisys.msml-dialog-group+xml", True),
    ("application/vnd.radisys.msml-dialog-speech+xml", True),
    ("application/vnd.radisys.msml-dialog-transform+xml", True),
    ("application/vnd.recordare.musicxml+xml", True),
    ("application/vnd.restful+json", True),
    ("application/vnd.route66.link66+xml", True),
    ("application/vnd.seis+json", True),
    ("application/vnd.shootproof+json", True),
    ("application/vnd.shopkick+json", True),
    ("application/vnd.siren+json", True),
    ("application/vnd.software602.filler.form+xml", True),
    ("application/vnd.solent.sdkm+xml", True),
    ("application/vnd.sun.wadl+xml", True),
    ("application/vnd.sycle+xml", True),
    ("application/vnd.syncml+xml", True),
    ("application/vnd.syncml.dm+xml", True),
    ("application/vnd.syncml.dmddf+xml", True),
    ("application/vnd.syncml.dmtnds+xml", True),
    ("application/vnd.tableschema+json", True),
    ("application/vnd.think-cell.ppttc+json", True),
    ("application/vnd.tmd.mediaflex.api+xml", True),
    ("application/vnd.uoml+xml", True),
    ("application/vnd.vel+json", True),
    ("application/vnd.wv.csp+xml", True),
    ("application/vnd.wv.ssp+xml", True),
    ("application/vnd.xacml+json", True),
    ("application/vnd.xmi+xml", True),
    ("application/vnd.yamaha.openscoreformat.osfpvg+xml", True),
    ("application/vnd.zzazz.deck+xml", True),
    ("application/voicexml+xml", True),
    ("application/voucher-cms+json", True),
    ("application/wasm", True),
    ("application/watcherinfo+xml", True),
    ("application/webpush-options+json", True),
    ("application/wsdl+xml", True),
    ("application/wspolicy+xml", True),
    ("application/x-dtbncx+xml", True),
    ("application/x-dtbook+xml", True),
    ("application/x-dtbresource+xml", True),
    ("application/x-httpd-php", True),
    ("application/x-javascript", True),
    ("application/x-ns-proxy-autoconfig", True),
    ("application/x-sh", True),
    ("application/x-tar", True),
    ("application/x-virtualbox-hdd", True),
    ("application/x-virtualbox-ova", True),
    ("application/x-virtualbox-ovf", True),
    ("application/x-virtualbox-vbox", True),
    ("application/x-virtualbox-vdi", True),
    ("application/x-virtualbox-vhd", True),
    ("application/x-virtualbox-vmdk", True),
    ("application/x-web-app-manifest+json", True),
    ("application/x-www-form-urlencoded", True),
    ("application/x-xliff+xml", True),
    ("application/xacml+xml", True),
    ("application/xaml+xml", True),
    ("application/xcap-att+xml", True),
    ("application/xcap-caps+xml", True),
    ("application/xcap-diff+xml", True),
    ("application/xcap-el+xml", True),
    ("application/xcap-error+xml", True),
    ("application/xcap-ns+xml", True),
    ("application/xcon-conference-info+xml", True),
    ("application/xcon-conference-info-diff+xml", True),
    ("application/xenc+xml", True),
    ("application/xhtml+xml", True),
    ("application/xhtml-voice+xml", True),
    ("application/xliff+xml", True),
    ("application/xml", True),
    ("application/xml-dtd", True),
    ("application/xml-patch+xml", True),
    ("application/xmpp+xml", True),
    ("application/xop+xml", True),
    ("application/xproc+xml", True),
    ("application/xslt+xml", True),
    ("application/xspf+xml", True),
    ("application/xv+xml", True),
    ("application/yang-data+json", True),
    ("application/yang-data+xml", True),
    ("application/yang-patch+json", True),
    ("application/yang-patch+xml", True),
    ("application/yin+xml", True),
    ("font/otf", True),
    ("font/ttf", True),
    ("image/bmp", True),
    ("image/svg+xml", True),
    ("image/vnd.adobe.photoshop", True),
    ("image/x-icon", True),
    ("image/x-ms-bmp", True),
    ("message/imdn+xml", True),
    ("message/rfc822", True),
    ("model/gltf+json", True),
    ("model/gltf-binary", True),
    ("model/vnd.collada+xml", True),
    ("model/vnd.moml+xml", True),
    ("model/x3d+xml", True),
    ("text/cache-manifest", True),
    ("text/calender", True),
    ("text/cmd", True),
    ("text/css", True),
    ("text/csv", True),
    ("text/html", True),
    ("text/javascript", True),
    ("text/jsx", True),
    ("text/less", True),
    ("text/markdown", True),
    ("text/mdx", True),
    ("text/n3", True),
    ("text/plain", True),
    ("text/richtext", True),
    ("text/rtf", True),
    ("text/tab-separated-values", True),
    ("text/uri-list", True),
    ("text/vcard", True),
    ("text/vtt", True),
    ("text/x-gwt-rpc", True),
    ("text/x-jquery-tmpl", True),
    ("text/x-markdown", True),
    ("text/x-org", True),
    ("text/x-processing", True),
    ("text/x-suse-ymp", True),
    ("text/xml", True),
    ("text/yaml", True),
    ("x-shader/x-fragment", True),
    ("x-shader/x-vertex", True),
)
